"""Smoke tests — verify package wiring and the CLI error boundary.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Script and interactive modes route to the engine.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

import cmdtree
from cmdtree import __version__
from cmdtree.cli import app as app_module
from cmdtree.cli import exit_codes
from cmdtree.cli.app import cli, main
from cmdtree.exceptions import (
    ActionWithChildrenError,
    ActionWithOnEnterError,
    CmdTreeError,
    ConfigurationError,
    CycleError,
    EmptyCommandError,
    EnvironmentError,
    LeafEntryError,
    LineSourceError,
    MissingActionError,
    SelfParentingError,
)


# ---------------------------------------------------------------------------
# Version / public API
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_public_names(self) -> None:
        assert cmdtree.Command.__name__ == "Command"
        assert cmdtree.Parameter.__name__ == "Parameter"


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ActionWithChildrenError,
            ActionWithOnEnterError,
            CycleError,
            EmptyCommandError,
            LeafEntryError,
            SelfParentingError,
        ],
    )
    def test_configuration_errors(self, exc_class: type[CmdTreeError]) -> None:
        assert issubclass(exc_class, ConfigurationError)

    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, LineSourceError, EnvironmentError, MissingActionError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CmdTreeError]
    ) -> None:
        assert issubclass(exc_class, CmdTreeError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CmdTreeError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CmdTreeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = CmdTreeError("boom")
        assert err.hint is None

    def test_missing_action_names_command(self) -> None:
        err = MissingActionError("broken")
        assert err.command_name == "broken"
        assert str(err) == "Missing action for broken command"
        assert err.hint is not None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_script_session(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        script = tmp_path / "session.txt"
        script.write_text("status\nconfig\nshow\nexit\nexit\n", encoding="utf-8")

        code = main(["--script", str(script)])

        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "root>OK" in out
        assert "root(config)>cfg" in out

    def test_script_custom_root_name(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        script = tmp_path / "session.txt"
        script.write_text("config\n", encoding="utf-8")

        main(["--script", str(script), "--name", "svc"])

        assert "svc(config)>" in capsys.readouterr().out

    def test_missing_script_raises(self, tmp_path: Path) -> None:
        with pytest.raises(LineSourceError, match="Cannot open script"):
            main(["--script", str(tmp_path / "missing.txt")])

    def test_script_with_unknown_command(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        script = tmp_path / "session.txt"
        script.write_text("bogus\n", encoding="utf-8")

        assert main(["--script", str(script)]) == exit_codes.SUCCESS
        assert "Invalid command, type help" in capsys.readouterr().out

    def test_interactive_reads_stdin_when_not_a_tty(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("status\nexit\n"))

        assert main([]) == exit_codes.SUCCESS
        assert "OK" in capsys.readouterr().out

    def test_plain_mode_uses_rich_input(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        rich_console = MagicMock()
        rich_console.input.side_effect = ["status", "exit"]
        monkeypatch.setattr(
            "cmdtree.cli.console.get_rich_console", lambda **_kw: rich_console,
        )

        assert main(["--plain"]) == exit_codes.SUCCESS
        assert rich_console.input.call_count == 2
        rich_console.print.assert_any_call(
            "OK",
            end="\n",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def test_script_prints_brackets_verbatim(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        script = tmp_path / "session.txt"
        script.write_text(
            'echo "[bold]x[/bold] [tag]"\necho [/red]\nstatus\nexit\n',
            encoding="utf-8",
        )

        code = main(["--script", str(script)])

        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "root>[bold]x[/bold] [tag]\n" in out
        assert "root>[/red]\n" in out
        assert "root>OK\n" in out

    def test_script_long_line_is_not_wrapped(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        words = " ".join(["word"] * 30)
        script = tmp_path / "session.txt"
        script.write_text(f"echo {words}\nexit\n", encoding="utf-8")

        assert main(["--script", str(script)]) == exit_codes.SUCCESS
        assert f"root>{words}\n" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run(self, monkeypatch: pytest.MonkeyPatch, behaviour: object) -> int:
        def _main() -> int:
            if isinstance(behaviour, BaseException):
                raise behaviour
            return int(behaviour)  # type: ignore[call-overload]

        monkeypatch.setattr(app_module, "main", _main)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return int(exc_info.value.code)  # type: ignore[arg-type]

    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run(monkeypatch, exit_codes.SUCCESS) == exit_codes.SUCCESS

    def test_known_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run(monkeypatch, MissingActionError("broken"))
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Missing action for broken command" in err
        assert "Hint:" in err
        assert "[bold red]" not in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        code = self._run(monkeypatch, KeyboardInterrupt())
        assert code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run(monkeypatch, RuntimeError("kaboom"))
        assert code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err
