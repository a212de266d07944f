"""CLI application entry point for pizza-validator.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pizza_validator.exceptions.PizzaValidatorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering plain
messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — reading is delegated to ``infra`` and
  validation to ``core``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import NoReturn

from pizza_validator.cli import exit_codes
from pizza_validator.cli.console import configure_logging, err, out
from pizza_validator.core.validation import validate_pizza
from pizza_validator.exceptions import PizzaValidatorError
from pizza_validator.infra.json_loader import load_json_file
from pizza_validator.version import __version__

PROG = "pizza-validator"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` whose usage errors exit with ``GENERAL_ERROR``."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(exit_codes.GENERAL_ERROR, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    The CLI supports:
    * ``pizza-validator <json-file>``  — validate one file
    * ``pizza-validator --help``
    * ``pizza-validator --version``
    """
    parser = _ArgumentParser(
        prog=PROG,
        usage="%(prog)s <json-file>",
        description="validates a JSON file to check if it contains a valid pizza.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log file loading and validation details to stderr",
    )
    parser.add_argument(
        "json_file",
        nargs="?",
        default=None,
        metavar="json-file",
        help="path to the JSON document to validate",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_validate(path: str) -> int:
    """Load *path*, validate it, and report the outcome.

    File and JSON failures propagate as typed exceptions to :func:`cli`.
    """
    data = load_json_file(path)
    result = validate_pizza(data)

    if result.valid:
        out.print("✓ Valid pizza!", style="bold green")
        out.print(json.dumps(result.pizza.to_dict(), indent=2, ensure_ascii=False))
        return exit_codes.SUCCESS

    err.print("✗ Invalid pizza:", style="bold red")
    err.print(result.errors)
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the pizza-validator CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.json_file is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    return _handle_validate(args.json_file)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except PizzaValidatorError as exc:
        err.print(str(exc))
        if exc.detail:
            err.print(exc.detail)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err.print("\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err.print(f"Unknown error: {exc}")
        sys.exit(exit_codes.GENERAL_ERROR)
