"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) and plain validation keep working when Rich
is not installed.  Text is always printed with markup and emoji
substitution disabled and soft-wrapping on, so Rich output is identical
to the plain fallback apart from styling on a terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from pizza_validator.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, soft_wrap=True, highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, text: str = "", *, style: str | None = None) -> None:
		"""Render with Rich when available, else plain ``print``."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			print(text, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(text, style=style, markup=False, emoji=False)


out = _ConsoleProxy(stderr=False)
err = _ConsoleProxy(stderr=True)


def configure_logging(verbose: bool) -> None:
	"""Send ``pizza_validator`` debug records to stderr when *verbose*.

	Uses ``rich.logging.RichHandler`` when Rich is installed, otherwise a
	plain stream handler.  Without *verbose* nothing is installed and
	the package logger keeps propagating at the default level.
	"""
	if not verbose:
		return

	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
	else:
		handler = RichHandler(console=get_rich_console(stderr=True), show_path=False)

	package_logger = logging.getLogger("pizza_validator")
	package_logger.handlers[:] = [handler]
	package_logger.setLevel(logging.DEBUG)
