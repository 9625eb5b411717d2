"""Exception hierarchy for tokenauth.

All exceptions inherit from :class:`TokenAuthError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`tokenauth.exit_codes`.
The CLI catches ``TokenAuthError`` and exits with the appropriate code.

Token file read failures are deliberately absent from this hierarchy: a
file-backed token surfaces the builtin :class:`OSError` family
(``FileNotFoundError``, ``PermissionError``, ...) at the moment the token is
requested, never at configuration time.

Subclass hierarchy::

    TokenAuthError (exit 1)
    +-- AuthError           (exit 3)
    +-- PluginError         (exit 10)
    +-- ConfigError         (exit 1)
"""

from tokenauth.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_GENERIC_FAILURE,
    EXIT_PLUGIN_ERROR,
)


class TokenAuthError(Exception):
    """Base exception for all tokenauth errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`tokenauth.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class AuthError(TokenAuthError):
    """Raised when a provider is asked for a credential it cannot supply."""

    exit_code = EXIT_AUTH_FAILURE


class PluginError(TokenAuthError):
    """Raised when an authentication plugin cannot be found, imported, or instantiated."""

    exit_code = EXIT_PLUGIN_ERROR


class ConfigError(TokenAuthError):
    """Raised for configuration problems (invalid JSON, bad auth params, unconfigured provider)."""

    exit_code = EXIT_GENERIC_FAILURE
