"""Abstract base classes for authentication plugins.

This module defines the two foundational types of the auth subsystem:

- :class:`AuthenticationDataProvider` -- the capability set consumed by the
  transport layer: command-channel data for the binary protocol handshake,
  HTTP headers for REST calls, and TLS client material.
- :class:`Authentication` -- the configurable, closeable component a client
  holds for its lifetime and asks for a data provider whenever it opens a
  connection or sends a request.

To implement a new auth method, subclass :class:`Authentication`, set the
:attr:`~Authentication.auth_method_name` property, and implement
:meth:`~Authentication.configure` and :meth:`~Authentication.get_auth_data`.
The data provider only overrides the capabilities it actually supplies; the
defaults describe a provider that offers nothing.

See Also:
    :mod:`tokenauth.auth.factory` for plugin registration and lookup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class AuthenticationDataProvider:
    """Credential data handed to the transport layer.

    Every accessor may be called many times over the life of a connection,
    possibly from several threads. Implementations must not hold resources
    between calls.

    The ``has_data_*`` predicates tell the transport which of the accessors
    are meaningful. Calling an accessor whose predicate is ``False`` returns
    the empty default rather than raising.
    """

    # TLS

    def has_data_for_tls(self) -> bool:
        """Return ``True`` if this provider supplies a TLS client certificate."""
        return False

    def get_tls_certificates(self) -> Optional[Any]:
        """Return the TLS client certificate chain, or ``None``."""
        return None

    def get_tls_private_key(self) -> Optional[Any]:
        """Return the TLS client private key, or ``None``."""
        return None

    # HTTP

    def has_data_for_http(self) -> bool:
        """Return ``True`` if this provider supplies HTTP headers."""
        return False

    def get_http_headers(self) -> set[tuple[str, str]]:
        """Return the ``(name, value)`` header pairs to add to an HTTP request.

        Returns:
            A set of header pairs. Empty by default.
        """
        return set()

    # Command channel

    def has_data_from_command(self) -> bool:
        """Return ``True`` if this provider supplies command-channel data."""
        return False

    def get_command_data(self) -> Optional[str]:
        """Return the raw credential payload for the protocol handshake, or ``None``."""
        return None


class Authentication(ABC):
    """Abstract base class for authentication plugins.

    Every concrete auth method must subclass this and provide:

    1. An :attr:`auth_method_name` property returning the identifier sent
       to the server alongside the credential (e.g. ``"token"``).
    2. A :meth:`configure` implementation that accepts the plugin's
       parameter string.
    3. A :meth:`get_auth_data` implementation returning an
       :class:`AuthenticationDataProvider`.

    The lifecycle is: construct, :meth:`configure`, :meth:`start`, any
    number of :meth:`get_auth_data` calls, then :meth:`close`. Instances
    are context managers; leaving the ``with`` block calls :meth:`close`.
    """

    @property
    @abstractmethod
    def auth_method_name(self) -> str:
        """Return the auth method identifier this plugin implements.

        Returns:
            A lowercase string such as ``"token"`` or ``"none"``.
        """
        ...

    @abstractmethod
    def get_auth_data(self) -> AuthenticationDataProvider:
        """Return the data provider used for the next connection or request.

        Returns:
            An :class:`AuthenticationDataProvider`.

        Raises:
            ConfigError: If the plugin has not been configured.
        """
        ...

    @abstractmethod
    def configure(self, auth_params: str) -> None:
        """Configure the plugin from its parameter string.

        Args:
            auth_params: Plugin-specific parameter string.
        """
        ...

    def start(self) -> None:
        """Initialise the plugin after configuration. No-op by default."""

    def close(self) -> None:
        """Release any resources held by the plugin.

        Must be idempotent and must never raise. No-op by default.
        """

    def __enter__(self) -> Authentication:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
