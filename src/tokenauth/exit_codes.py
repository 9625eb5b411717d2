"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~tokenauth.exceptions.TokenAuthError` subclass.
Shell wrappers that fetch a token before calling another tool can inspect
the exit code to tell a bad configuration apart from an unreadable token
file without parsing stderr.

Example::

    $ tokenauth header --auth-params file:///run/secrets/token
    $ echo $?
    4   # EXIT_TOKEN_UNAVAILABLE -- the token file could not be read
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_AUTH_FAILURE = 3
"""The authentication provider cannot supply the requested credential."""

EXIT_TOKEN_UNAVAILABLE = 4
"""The token source could not be read (missing file, permission denied)."""

EXIT_PLUGIN_ERROR = 10
"""An authentication plugin failed to load or could not be found."""
