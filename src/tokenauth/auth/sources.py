"""Token sources -- where the current token value comes from.

A :class:`TokenSource` is a resolved, callable strategy with one operation,
:meth:`~TokenSource.current_value`. Three variants exist:

- :class:`StaticTokenSource` -- a literal value fixed for the source's lifetime.
- :class:`FileTokenSource` -- a file path; every access opens, reads, and
  closes the file, so a token rotated on disk by an external agent is seen
  on the very next call.
- :class:`SupplierTokenSource` -- a zero-argument callable invoked on every
  access, for tokens produced by application code.

:func:`resolve_token_source` turns a configuration string into a source
using the prefix grammar below. Parsing is permissive: every string is
accepted, and anything without a recognised prefix is a literal token.

================  =========================================
Config string     Resolved source
================  =========================================
``file://PATH``   :class:`FileTokenSource` over ``PATH``
``token:VALUE``   :class:`StaticTokenSource` of ``VALUE``
anything else     :class:`StaticTokenSource` of the string
================  =========================================
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

FILE_PREFIX = "file://"
"""Prefix marking a reference to a file holding the token."""

TOKEN_PREFIX = "token:"
"""Prefix marking an explicit literal token."""


class TokenSource(ABC):
    """A resolved source of the current token value."""

    @abstractmethod
    def current_value(self) -> str:
        """Return the token as of this call."""
        ...


@dataclass(frozen=True)
class StaticTokenSource(TokenSource):
    """Literal token. Returned exactly as given, no trimming."""

    value: str

    def current_value(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "StaticTokenSource(value=***)"


@dataclass(frozen=True)
class FileTokenSource(TokenSource):
    """Token stored in a UTF-8 text file, re-read on every access.

    The file does not need to exist when the source is created. Surrounding
    whitespace and line breaks are stripped from the contents. Bytes that
    are not valid UTF-8 are replaced with U+FFFD rather than rejected.

    Attributes:
        path: Filesystem path of the token file.
    """

    path: str

    def current_value(self) -> str:
        """Read the token file and return its stripped contents.

        Returns:
            The token with leading and trailing whitespace removed.

        Raises:
            OSError: If the file is missing, unreadable, not a regular file,
                or the path itself is invalid (e.g. contains a NUL byte).
        """
        logger.debug("Reading token from %r", self.path)
        try:
            content = Path(self.path).read_text(encoding="utf-8", errors="replace")
        except ValueError as exc:
            raise OSError(f"Invalid token file path {self.path!r}: {exc}") from exc
        return content.strip()


@dataclass(frozen=True)
class SupplierTokenSource(TokenSource):
    """Token produced by calling ``supplier()`` on every access."""

    supplier: Callable[[], str]

    def current_value(self) -> str:
        return self.supplier()


def resolve_token_source(config: str) -> TokenSource:
    """Resolve a configuration string into a :class:`TokenSource`.

    Never raises. For ``file://`` references the file is not opened here;
    any read error surfaces on the first :meth:`~TokenSource.current_value`
    call.

    Args:
        config: ``file://PATH``, ``token:VALUE``, or a bare literal token.

    Returns:
        The resolved source.

    Example::

        >>> resolve_token_source("token:abc").current_value()
        'abc'
        >>> resolve_token_source("file:///run/secrets/token")
        FileTokenSource(path='/run/secrets/token')
    """
    if config.startswith(FILE_PREFIX):
        path = config[len(FILE_PREFIX):]
        logger.debug("Token will be read from file %s", path)
        return FileTokenSource(path)

    if config.startswith(TOKEN_PREFIX):
        return StaticTokenSource(config[len(TOKEN_PREFIX):])

    return StaticTokenSource(config)
