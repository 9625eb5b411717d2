"""HTTP transport integration for tokenauth.

Classes:
    :class:`ProviderAuth` -- :class:`httpx.Auth` adapter that adds the
    configured plugin's HTTP headers to every request.
"""

from tokenauth.client.httpx_auth import ProviderAuth

__all__ = ["ProviderAuth"]
