"""Tests for the output formatting system.

Covers:
- OutputFormat resolution (auto -> rich/plain based on TTY)
- NO_COLOR / TERM=dumb color disabling
- stdout vs stderr discipline
- Quiet and verbose modes
- print_record and print_table in all three modes
- Global instance management
"""

from __future__ import annotations

import json

import pytest

from tokenauth.output import (
    OutputFormat,
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)
from tokenauth import output as output_module


@pytest.fixture(autouse=True)
def _reset_global_output():
    reset_output()
    yield
    reset_output()


@pytest.fixture()
def non_tty(monkeypatch):
    monkeypatch.setattr("tokenauth.output._is_tty", lambda: False)


@pytest.fixture()
def tty(monkeypatch):
    monkeypatch.setattr("tokenauth.output._is_tty", lambda: True)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("TERM", raising=False)


class TestFormatResolution:
    def test_auto_non_tty_is_plain(self, non_tty) -> None:
        assert OutputManager().format == OutputFormat.PLAIN

    def test_auto_tty_is_rich(self, tty) -> None:
        assert OutputManager().format == OutputFormat.RICH

    def test_auto_tty_no_color_is_plain(self, tty) -> None:
        assert OutputManager(no_color=True).format == OutputFormat.PLAIN

    def test_explicit_json(self, tty) -> None:
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON


class TestColorDisabling:
    def test_no_color_env(self, monkeypatch) -> None:
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb(self, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_default_enabled(self, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


class TestPrintRecord:
    def test_json(self, capsys) -> None:
        out = OutputManager(format=OutputFormat.JSON, no_color=True)
        out.print_record({"auth_method": "token", "has_data_for_tls": False})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"auth_method": "token", "has_data_for_tls": False}
        assert captured.err == ""

    def test_plain(self, capsys) -> None:
        out = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        out.print_record(
            {"auth_method": "token", "has_data_for_tls": False, "command_data": None,
             "http_headers": ["a", "b"]}
        )
        assert capsys.readouterr().out.splitlines() == [
            "auth_method\ttoken",
            "has_data_for_tls\tno",
            "command_data\t-",
            "http_headers\ta, b",
        ]


class TestPrintTable:
    def test_json(self, capsys) -> None:
        out = OutputManager(format=OutputFormat.JSON, no_color=True)
        out.print_table(["method"], [["none"], ["token"]])
        assert json.loads(capsys.readouterr().out) == [{"method": "none"}, {"method": "token"}]

    def test_plain(self, capsys) -> None:
        out = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        out.print_table(["method"], [["token"]])
        assert capsys.readouterr().out == "method\ntoken\n"


class TestDiagnostics:
    def test_error_goes_to_stderr(self, capsys) -> None:
        OutputManager(no_color=True).error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: boom\n"

    def test_warning_not_suppressed_by_quiet(self, capsys) -> None:
        OutputManager(no_color=True, quiet=True).warning("careful")
        assert "Warning: careful" in capsys.readouterr().err

    def test_info_suppressed_by_quiet(self, capsys) -> None:
        OutputManager(no_color=True, quiet=True).info("hello")
        assert capsys.readouterr().err == ""

    def test_debug_only_when_verbose(self, capsys) -> None:
        OutputManager(no_color=True).debug("hidden")
        OutputManager(no_color=True, verbose=True).debug("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "[debug] shown" in err


class TestGlobalInstance:
    def test_lazy_default(self) -> None:
        assert isinstance(get_output(), OutputManager)

    def test_set_and_reset(self) -> None:
        manager = OutputManager(no_color=True)
        set_output(manager)
        assert get_output() is manager
        reset_output()
        assert get_output() is not manager

    def test_convenience_functions(self, capsys) -> None:
        set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True))
        output_module.print_data("data")
        output_module.error("bad")
        captured = capsys.readouterr()
        assert captured.out == "data\n"
        assert captured.err == "Error: bad\n"
