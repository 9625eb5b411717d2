"""Plugin-based authentication for tokenauth.

The main entry points are:

- :class:`Authentication` / :class:`AuthenticationDataProvider` -- the
  plugin contract consumed by the transport layer.
- :class:`AuthenticationToken` -- bearer token auth from a literal, a
  ``token:`` string, a ``file://`` reference, or a callable.
- :class:`AuthenticationDisabled` -- the ``none`` method.
- :class:`AuthenticationFactory` / :func:`create_default_factory` --
  registry that builds configured plugins by name.
- :func:`resolve_token_source` -- the configuration string grammar.

Typical usage::

    from tokenauth.auth import create_default_factory

    auth = create_default_factory().create("token", "file:///run/secrets/token")
    headers = auth.get_auth_data().get_http_headers()
"""

from tokenauth.auth.base import Authentication, AuthenticationDataProvider
from tokenauth.auth.disabled import AuthenticationDisabled
from tokenauth.auth.factory import AuthenticationFactory, create_default_factory, token
from tokenauth.auth.sources import (
    FileTokenSource,
    StaticTokenSource,
    SupplierTokenSource,
    TokenSource,
    resolve_token_source,
)
from tokenauth.auth.token import AuthenticationDataToken, AuthenticationToken

__all__ = [
    "Authentication",
    "AuthenticationDataProvider",
    "AuthenticationDataToken",
    "AuthenticationDisabled",
    "AuthenticationFactory",
    "AuthenticationToken",
    "FileTokenSource",
    "StaticTokenSource",
    "SupplierTokenSource",
    "TokenSource",
    "create_default_factory",
    "resolve_token_source",
    "token",
]
