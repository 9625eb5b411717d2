"""Disabled authentication -- the ``none`` auth method.

Used when a client connects to a server that does not require credentials.
The data provider inherits every default from
:class:`~tokenauth.auth.base.AuthenticationDataProvider`, so it offers no
command-channel data, no HTTP headers, and no TLS material.
"""

from __future__ import annotations

from tokenauth.auth.base import Authentication, AuthenticationDataProvider


class AuthenticationDisabled(Authentication):
    """Authentication plugin that supplies no credentials."""

    @property
    def auth_method_name(self) -> str:
        return "none"

    def configure(self, auth_params: str) -> None:
        # Parameters are accepted and ignored.
        pass

    def get_auth_data(self) -> AuthenticationDataProvider:
        return AuthenticationDataProvider()
