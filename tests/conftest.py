"""Shared pytest fixtures and configuration for the pizza-validator test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* File tests write only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from forcing colour codes into captured output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo ``--verbose`` logging configuration between tests."""
    yield
    package_logger = logging.getLogger("pizza_validator")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a factory that serialises an object to a temp ``.json`` file."""

    def _write(data: Any, name: str = "pizza.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
