"""Shared test fixtures for tokenauth.

Provides fixtures for writing token files and isolating configuration from
the developer's environment. These fixtures are
automatically discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tokenauth.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test, the cached references go stale once the test finishes.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Token files
# ---------------------------------------------------------------------------


@pytest.fixture
def token_file(tmp_path: Path) -> Path:
    """A token file containing ``my-test-token-string``."""
    path = tmp_path / "test-token.key"
    path.write_text("my-test-token-string", encoding="utf-8")
    return path


@pytest.fixture
def write_token(token_file: Path) -> Callable[[str], None]:
    """Overwrite the token file, as an external rotation agent would."""

    def _write(content: str) -> None:
        token_file.write_text(content, encoding="utf-8")

    return _write


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Clears all TOKENAUTH_* environment variables and changes the working
    directory to tmp_path so a stray ``tokenauth.json`` is never read.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    for var in ["TOKENAUTH_AUTH_PLUGIN", "TOKENAUTH_AUTH_PARAMS", "NO_COLOR"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path

