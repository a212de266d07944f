"""End-to-end tests for the CLI entry point and error boundary (cli/app.py).

Every scenario runs through :func:`cli` so that exit codes and the
stdout/stderr split are verified exactly as a shell would observe them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pizza_validator.cli import app as app_module
from pizza_validator.cli import exit_codes
from pizza_validator.cli.app import cli, main


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        cli(argv)
    code = exc_info.value.code
    assert isinstance(code, int)
    return code


# ---------------------------------------------------------------------------
# Help / version
# ---------------------------------------------------------------------------

class TestHelp:
    def test_no_args_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run([]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out.startswith("usage: pizza-validator <json-file>")
        assert "validates a JSON file to check if it contains a valid pizza." in captured.out
        assert "-h, --help" in captured.out
        assert captured.err == ""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_flag(self, flag: str, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run([flag]) == exit_codes.SUCCESS
        assert "usage: pizza-validator <json-file>" in capsys.readouterr().out

    def test_help_wins_over_file(
        self, write_json: Callable[[Any], Path], capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_json({"size": 12, "crust": "normal"})
        assert _run([str(path), "--help"]) == exit_codes.SUCCESS
        assert "Valid pizza" not in capsys.readouterr().out

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        from pizza_validator import __version__

        assert _run(["--version"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == f"pizza-validator {__version__}"

    def test_unknown_option_is_general_error(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run(["--bogus"]) == exit_codes.GENERAL_ERROR
        assert "unrecognized arguments" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Validation outcomes
# ---------------------------------------------------------------------------

class TestValidation:
    def test_valid_pizza(
        self, write_json: Callable[[Any], Path], capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_json(
            {"size": 14, "crust": "stuffed", "isDeepDish": True,
             "toppings": ["pepperoni", "bacon"]}
        )
        assert _run([str(path)]) == exit_codes.SUCCESS

        captured = capsys.readouterr()
        assert captured.out.startswith("✓ Valid pizza!\n")
        body = captured.out.split("\n", 1)[1]
        assert json.loads(body) == {
            "size": 14,
            "crust": "stuffed",
            "isDeepDish": True,
            "toppings": ["pepperoni", "bacon"],
        }
        assert '\n  "size": 14,' in body
        assert captured.err == ""

    def test_valid_pizza_omits_absent_toppings(
        self, write_json: Callable[[Any], Path], capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_json({"size": 12, "crust": "normal"})
        assert _run([str(path)]) == exit_codes.SUCCESS

        body = capsys.readouterr().out.split("\n", 1)[1]
        assert json.loads(body) == {"size": 12, "crust": "normal", "isDeepDish": False}
        assert "toppings" not in body

    def test_forbidden_toppings(
        self, write_json: Callable[[Any], Path], capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_json(
            {"size": 12, "crust": "normal", "toppings": ["spinach", "mushroom"]}
        )
        assert _run([str(path)]) == exit_codes.GENERAL_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("✗ Invalid pizza:\n")
        assert (
            "the following toppings are invalid: spinach, mushroom, chicken, turkey."
            in captured.err
        )

    def test_multiple_errors_on_one_line(
        self, write_json: Callable[[Any], Path], capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_json({"size": 0, "crust": "thin"})
        assert _run([str(path)]) == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == (
            "✗ Invalid pizza:\n"
            'size: pizza size must be a positive number; '
            'crust: crust must be either "stuffed" or "normal"\n'
        )

    def test_integral_float_size_printed_as_int(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "pizza.json"
        path.write_text('{"size": 14.0, "crust": "normal"}', encoding="utf-8")
        assert _run([str(path)]) == exit_codes.SUCCESS
        assert '\n  "size": 14,\n' in capsys.readouterr().out

    def test_overflowing_size_is_rejected(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "pizza.json"
        path.write_text('{"size": 1e400, "crust": "normal"}', encoding="utf-8")
        assert _run([str(path)]) == exit_codes.GENERAL_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "size: pizza size must be a positive number" in captured.err

    def test_non_object_document(
        self, write_json: Callable[[Any], Path], capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_json("not a pizza")
        assert _run([str(path)]) == exit_codes.GENERAL_ERROR
        assert "expected an object, received string" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Operational errors
# ---------------------------------------------------------------------------

class TestOperationalErrors:
    def test_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "does-not-exist.json"
        assert _run([str(path)]) == exit_codes.GENERAL_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == f'Error: File "{path}" not found.\n'

    def test_invalid_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"size": 12,', encoding="utf-8")
        assert _run([str(path)]) == exit_codes.GENERAL_ERROR

        lines = capsys.readouterr().err.splitlines()
        assert lines[0] == f'Error: Invalid JSON in file "{path}".'
        assert len(lines) == 2
        assert lines[1]

    def test_read_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run([str(tmp_path)]) == exit_codes.GENERAL_ERROR

        lines = capsys.readouterr().err.splitlines()
        assert lines[0] == f'Error reading file "{tmp_path}":'
        assert len(lines) == 2

    def test_unexpected_exception(
        self,
        write_json: Callable[[Any], Path],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _boom(value: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "validate_pizza", _boom)
        path = write_json({"size": 12, "crust": "normal"})

        assert _run([str(path)]) == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == "Unknown error: boom\n"

    def test_keyboard_interrupt(
        self,
        write_json: Callable[[Any], Path],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _interrupt(path: str) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "load_json_file", _interrupt)
        assert _run([str(write_json({}))]) == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted by user." in capsys.readouterr().err

    def test_main_propagates_typed_errors(self, tmp_path: Path) -> None:
        from pizza_validator.exceptions import PizzaFileNotFoundError

        with pytest.raises(PizzaFileNotFoundError):
            main([str(tmp_path / "missing.json")])


# ---------------------------------------------------------------------------
# Verbose logging
# ---------------------------------------------------------------------------

class TestVerbose:
    def test_verbose_logs_load_and_outcome(
        self,
        write_json: Callable[[Any], Path],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = write_json({"size": 12, "crust": "normal"})
        assert _run(["--verbose", str(path)]) == exit_codes.SUCCESS

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("decoded JSON dict") for m in messages)
        assert any(m.startswith("pizza accepted") for m in messages)

    def test_quiet_by_default(
        self,
        write_json: Callable[[Any], Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_json({"size": 12, "crust": "normal"})
        assert _run([str(path)]) == exit_codes.SUCCESS
        assert capsys.readouterr().err == ""
        assert logging.getLogger("pizza_validator").handlers == []
