"""tokenauth -- bearer-token authentication for messaging clients.

This package provides a pluggable authentication provider that produces a
bearer token for three consumers: the binary protocol's command channel,
HTTP requests (``Authorization: Bearer <token>``), and TLS (never used by
token auth). Tokens can be literal values or references to a file that is
re-read on every access, so rotating the file rotates the credential
without restarting the client.

Typical usage::

    from tokenauth import AuthenticationToken

    auth = AuthenticationToken()
    auth.configure("file:///var/run/secrets/broker-token")
    auth.get_auth_data().get_command_data()

Modules:
    auth: Authentication plugins, token sources, and the plugin factory.
    client: Adapter that plugs a provider into :mod:`httpx`.
    models: Pydantic models for token parameters and client settings.
    config: Settings resolution from flags, environment, and project file.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    app: Typer CLI entry point.
"""

from tokenauth.auth import (
    Authentication,
    AuthenticationDataProvider,
    AuthenticationDisabled,
    AuthenticationFactory,
    AuthenticationToken,
    create_default_factory,
    resolve_token_source,
)

__version__ = "0.1.0"

__all__ = [
    "Authentication",
    "AuthenticationDataProvider",
    "AuthenticationDisabled",
    "AuthenticationFactory",
    "AuthenticationToken",
    "create_default_factory",
    "resolve_token_source",
]
