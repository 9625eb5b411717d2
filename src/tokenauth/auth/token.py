"""Token authentication -- bearer tokens from a literal, a file, or a callable.

This module provides the ``token`` auth method:

- :class:`AuthenticationDataToken` -- the data provider. It supplies the
  token as command-channel data and as an ``Authorization: Bearer <token>``
  HTTP header, and never supplies TLS material.
- :class:`AuthenticationToken` -- the configurable plugin that holds a
  :class:`~tokenauth.auth.sources.TokenSource` and hands out data providers.

Every accessor asks the source for a fresh value. With a file-backed source
this means rotating the file on disk is enough to change the credential the
next connection presents; no restart or reconnect is needed.

Example::

    auth = AuthenticationToken()
    auth.configure("file:///var/run/secrets/broker-token")
    data = auth.get_auth_data()
    data.get_command_data()   # re-reads the file
    data.get_http_headers()   # {("Authorization", "Bearer <token>")}
    auth.close()

See Also:
    :func:`tokenauth.auth.sources.resolve_token_source` for the
    configuration string grammar.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from tokenauth.auth.base import Authentication, AuthenticationDataProvider
from tokenauth.auth.sources import (
    FILE_PREFIX,
    FileTokenSource,
    StaticTokenSource,
    SupplierTokenSource,
    TokenSource,
    resolve_token_source,
)
from tokenauth.exceptions import ConfigError
from tokenauth.models import TokenParams

AUTH_METHOD_NAME = "token"

HTTP_HEADER_NAME = "Authorization"


class AuthenticationDataToken(AuthenticationDataProvider):
    """Data provider backed by a :class:`~tokenauth.auth.sources.TokenSource`.

    :meth:`get_command_data` and :meth:`get_http_headers` each resolve the
    token independently. If the backing file changes between the two calls
    they may observe different values; callers needing one consistent value
    should call one accessor and reuse its result.
    """

    def __init__(self, source: TokenSource) -> None:
        self._source = source

    def has_data_for_http(self) -> bool:
        return True

    def get_http_headers(self) -> set[tuple[str, str]]:
        """Return the bearer ``Authorization`` header for the current token.

        Raises:
            OSError: If a file-backed token cannot be read.
        """
        return {(HTTP_HEADER_NAME, "Bearer " + self._source.current_value())}

    def has_data_from_command(self) -> bool:
        return True

    def get_command_data(self) -> str:
        """Return the current token.

        Raises:
            OSError: If a file-backed token cannot be read.
        """
        return self._source.current_value()


class AuthenticationToken(Authentication):
    """Token authentication plugin.

    Can be built three ways:

    - ``AuthenticationToken("tok")`` -- a literal token, used as-is.
    - ``AuthenticationToken(callable)`` -- the callable is invoked for every
      access.
    - ``AuthenticationToken()`` followed by :meth:`configure` or
      :meth:`configure_params`.

    Args:
        token: A literal token or a zero-argument callable returning one.
    """

    def __init__(self, token: Union[str, Callable[[], str], None] = None) -> None:
        self._source: Optional[TokenSource] = None
        if callable(token):
            self._source = SupplierTokenSource(token)
        elif token is not None:
            self._source = StaticTokenSource(token)

    @classmethod
    def from_source(cls, source: TokenSource) -> AuthenticationToken:
        """Build a plugin around an already-resolved source."""
        auth = cls()
        auth._source = source
        return auth

    @property
    def auth_method_name(self) -> str:
        return AUTH_METHOD_NAME

    @property
    def source(self) -> Optional[TokenSource]:
        """The configured token source, or ``None`` before configuration."""
        return self._source

    def configure(self, auth_params: str) -> None:
        """Configure from a ``token:``/``file://``/literal parameter string.

        Never fails; a file reference is not checked until the token is
        first requested.

        Args:
            auth_params: The parameter string.
        """
        self._source = resolve_token_source(auth_params)

    def configure_params(self, params: Mapping[str, Any]) -> None:
        """Configure from a mapping with either a ``token`` or a ``file`` key.

        Args:
            params: e.g. ``{"token": "abc"}`` or ``{"file": "/path/to/token"}``.

        Raises:
            ConfigError: If the mapping has neither or both keys, or
                unknown keys.
        """
        try:
            parsed = TokenParams.model_validate(dict(params))
        except ValidationError as exc:
            raise ConfigError(f"Invalid token auth params: {exc}") from exc

        if parsed.file is not None:
            path = parsed.file
            if path.startswith(FILE_PREFIX):
                path = path[len(FILE_PREFIX):]
            self._source = FileTokenSource(path)
        else:
            assert parsed.token is not None  # guaranteed by TokenParams
            self._source = StaticTokenSource(parsed.token)

    def get_auth_data(self) -> AuthenticationDataToken:
        """Return a data provider over the configured source.

        Raises:
            ConfigError: If no token or parameters were given yet.
        """
        if self._source is None:
            raise ConfigError(
                "Token authentication is not configured; pass a token or call configure()"
            )
        return AuthenticationDataToken(self._source)
