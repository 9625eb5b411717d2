"""Auth commands -- inspect and print the credentials a client would send.

Every command resolves the effective settings with
:func:`~tokenauth.config.resolve_config` (flags > environment > project
file), builds the auth plugin, and asks it for fresh data. Nothing is
cached between invocations, so running ``tokenauth header`` after a token
file was rotated prints the new token.

Typical workflow::

    tokenauth inspect --auth-params file:///run/secrets/token
    curl -H "$(tokenauth header --auth-params file:///run/secrets/token)" ...
"""

from __future__ import annotations

from typing import Optional

import typer

from tokenauth.auth.base import Authentication
from tokenauth.exceptions import AuthError, TokenAuthError
from tokenauth.exit_codes import EXIT_TOKEN_UNAVAILABLE
from tokenauth.output import (
    debug,
    error,
    info,
    print_data,
    print_record,
    print_table,
    warning,
)

AUTH_PLUGIN_OPTION = typer.Option(
    None, "--auth-plugin", help="Auth method name or import path (default: token)."
)
AUTH_PARAMS_OPTION = typer.Option(
    None, "--auth-params", help="Plugin parameters, e.g. token:VALUE or file:///path."
)


def _load_authentication(
    auth_plugin: Optional[str], auth_params: Optional[str]
) -> Authentication:
    """Resolve settings and build the plugin, exiting on configuration errors."""
    from tokenauth.config import create_authentication, resolve_config

    try:
        config = resolve_config(cli_auth_plugin=auth_plugin, cli_auth_params=auth_params)
        debug(f"Using auth plugin: {config.auth_plugin}")
        return create_authentication(config)
    except TokenAuthError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def _token_unavailable(exc: OSError) -> typer.Exit:
    error(f"Cannot read token: {exc}")
    return typer.Exit(code=EXIT_TOKEN_UNAVAILABLE)


def mask_token(token: str) -> str:
    """Hide all but the first four characters of a token.

    Tokens of eight characters or fewer are hidden entirely.
    """
    if len(token) <= 8:
        return "***"
    return token[:4] + "..."


def inspect_command(
    auth_plugin: Optional[str] = AUTH_PLUGIN_OPTION,
    auth_params: Optional[str] = AUTH_PARAMS_OPTION,
    reveal: bool = typer.Option(
        False, "--reveal", help="Show the token instead of masking it."
    ),
) -> None:
    """Show the auth method and every credential it supplies.

    Example::

        tokenauth inspect --auth-params token:abc
    """
    with _load_authentication(auth_plugin, auth_params) as auth:
        data = auth.get_auth_data()

        def shown(value: str) -> str:
            return value if reveal else mask_token(value)

        if reveal:
            warning("Printing the token in clear text.")

        try:
            command_data = data.get_command_data() if data.has_data_from_command() else None
            headers = (
                sorted(data.get_http_headers()) if data.has_data_for_http() else []
            )
        except OSError as exc:
            raise _token_unavailable(exc) from None

        header_lines = []
        for name, value in headers:
            scheme, _, credential = value.partition(" ")
            if credential:
                header_lines.append(f"{name}: {scheme} {shown(credential)}")
            else:
                header_lines.append(f"{name}: {shown(value)}")

        print_record(
            {
                "auth_method": auth.auth_method_name,
                "has_data_from_command": data.has_data_from_command(),
                "command_data": shown(command_data) if command_data is not None else None,
                "has_data_for_http": data.has_data_for_http(),
                "http_headers": header_lines,
                "has_data_for_tls": data.has_data_for_tls(),
            },
            title="Authentication",
        )


def header_command(
    auth_plugin: Optional[str] = AUTH_PLUGIN_OPTION,
    auth_params: Optional[str] = AUTH_PARAMS_OPTION,
) -> None:
    """Print the HTTP auth headers as ``Name: value`` lines.

    Example::

        curl -H "$(tokenauth header --auth-params file:///run/secrets/token)" URL
    """
    with _load_authentication(auth_plugin, auth_params) as auth:
        data = auth.get_auth_data()
        if not data.has_data_for_http():
            exc = AuthError(f"Auth method '{auth.auth_method_name}' supplies no HTTP headers")
            error(str(exc))
            raise typer.Exit(code=exc.exit_code)
        try:
            headers = sorted(data.get_http_headers())
        except OSError as exc:
            raise _token_unavailable(exc) from None
        for name, value in headers:
            print_data(f"{name}: {value}")


def token_command(
    auth_plugin: Optional[str] = AUTH_PLUGIN_OPTION,
    auth_params: Optional[str] = AUTH_PARAMS_OPTION,
) -> None:
    """Print the current command-channel credential, raw.

    Example::

        tokenauth token --auth-params file:///run/secrets/token
    """
    with _load_authentication(auth_plugin, auth_params) as auth:
        data = auth.get_auth_data()
        if not data.has_data_from_command():
            exc = AuthError(f"Auth method '{auth.auth_method_name}' supplies no command data")
            error(str(exc))
            raise typer.Exit(code=exc.exit_code)
        try:
            command_data = data.get_command_data()
        except OSError as exc:
            raise _token_unavailable(exc) from None
        print_data(command_data or "")


def plugins_command() -> None:
    """List the available auth methods, including installed third-party plugins."""
    from tokenauth.auth.factory import create_default_factory

    factory = create_default_factory()
    for name in factory.discover():
        info(f"Loaded third-party auth plugin: {name}")
    print_table(["method"], [[name] for name in factory.list_types()], title="Auth methods")
