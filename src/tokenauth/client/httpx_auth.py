"""httpx integration -- inject provider headers into every request.

:class:`ProviderAuth` adapts an :class:`~tokenauth.auth.base.Authentication`
plugin to :class:`httpx.Auth`. It asks the plugin for fresh auth data on
each request, so a file-backed token that was rotated on disk is sent on
the next request without rebuilding the client.

The same instance works with :class:`httpx.Client` and
:class:`httpx.AsyncClient`. Reading a token file is a short blocking read
performed inline, as it is for the synchronous client.

Example::

    auth = create_default_factory().create("token", "file:///run/secrets/token")
    with httpx.Client(base_url="https://admin.example.com", auth=ProviderAuth(auth)) as client:
        client.get("/admin/v2/clusters")
"""

from __future__ import annotations

import logging
from typing import Generator

import httpx

from tokenauth.auth.base import Authentication

logger = logging.getLogger(__name__)


class ProviderAuth(httpx.Auth):
    """:class:`httpx.Auth` that applies an auth plugin's HTTP headers.

    Requests are sent unchanged when the plugin's data provider reports no
    HTTP data (e.g. the ``none`` method). Token read errors propagate out of
    the request call.

    Args:
        authentication: The configured auth plugin.
    """

    def __init__(self, authentication: Authentication) -> None:
        self._authentication = authentication

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        data = self._authentication.get_auth_data()
        if data.has_data_for_http():
            for name, value in data.get_http_headers():
                request.headers[name] = value
            logger.debug(
                "Applied %s auth headers to %s %s",
                self._authentication.auth_method_name,
                request.method,
                request.url,
            )
        yield request
