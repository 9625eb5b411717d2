"""Typer application and CLI entry point for tokenauth.

This module wires together the top-level Typer application and registers
the built-in commands (``inspect``, ``header``, ``token``, ``plugins``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler, invokes the Typer app,
and maps :class:`~tokenauth.exceptions.TokenAuthError` to its exit code.

See Also:
    :mod:`tokenauth.config`: Settings resolution used by every command.
    :mod:`tokenauth.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any

import typer

from tokenauth import __version__
from tokenauth.commands.auth import (
    header_command,
    inspect_command,
    plugins_command,
    token_command,
)
from tokenauth.exit_codes import EXIT_GENERIC_FAILURE, EXIT_SUCCESS


app = typer.Typer(
    name="tokenauth",
    help="Inspect and print bearer-token credentials for messaging clients.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("inspect")(inspect_command)
app.command("header")(header_command)
app.command("token")(token_command)
app.command("plugins")(plugins_command)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"tokenauth {__version__}")
        raise typer.Exit(code=EXIT_SUCCESS)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~tokenauth.output.OutputManager` from
    CLI flags and, with ``--verbose``, routes library log records at DEBUG
    level to stderr.
    """
    from tokenauth.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    )

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``tokenauth`` console script.

    Unhandled :class:`~tokenauth.exceptions.TokenAuthError` instances
    cause a clean exit with the error's ``exit_code``. Any other exception
    is reported on stderr and exits with :data:`EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from tokenauth.exceptions import TokenAuthError
        from tokenauth.output import error

        error(str(exc))
        if isinstance(exc, TokenAuthError):
            sys.exit(exc.exit_code)
        sys.exit(EXIT_GENERIC_FAILURE)
