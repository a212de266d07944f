"""Infrastructure: read a JSON document from disk.

This module is the **only** place that touches the filesystem.  Every
``OSError`` and decode failure is caught here and re-raised as a typed
:class:`~pizza_validator.exceptions.InputFileError` subclass.

Rules
-----
* Strict JSON only: ``NaN`` / ``Infinity`` literals are rejected.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pizza_validator.exceptions import FileReadError, InvalidJSONError, PizzaFileNotFoundError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def read_text(path: str | Path) -> str:
    """Return the full UTF-8 content of *path*.

    Raises
    ------
    PizzaFileNotFoundError
        When *path* does not exist.
    FileReadError
        For any other OS-level failure or invalid UTF-8.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PizzaFileNotFoundError(path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, str(exc)) from exc

    logger.debug("read %d characters from %s", len(text), path)
    return text


def load_json_file(path: str | Path) -> Any:
    """Read *path* and decode it as JSON.

    Raises
    ------
    PizzaFileNotFoundError
        When *path* does not exist.
    InvalidJSONError
        When the content is not valid JSON.
    FileReadError
        For any other read failure.
    """
    text = read_text(path)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJSONError(path, str(exc)) from exc

    logger.debug("decoded JSON %s from %s", type(data).__name__, path)
    return data
