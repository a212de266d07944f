"""Custom exception hierarchy for pizza-validator.

Validation failures are *data* (see :mod:`pizza_validator.core.validation`)
and never surface as exceptions from :func:`validate_pizza`.  The classes
here cover the two places that do raise: strict schema parsing and the
file/JSON boundary used by the CLI.  Raw ``OSError`` / ``ValueError``
instances must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
PizzaValidatorError
├── PizzaSchemaError
├── MissingDependencyError
└── InputFileError
    ├── PizzaFileNotFoundError
    ├── InvalidJSONError
    └── FileReadError
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pizza_validator.core.models import Issue


class PizzaValidatorError(Exception):
    """Base exception for all pizza-validator errors.

    ``str(exc)`` is the headline shown to the user by the CLI error
    boundary; :attr:`detail` is an optional second line (typically the
    underlying parser or OS message).
    """

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail: str | None = detail
        """Optional underlying message rendered below the headline."""


# --- Schema ----------------------------------------------------------------

class PizzaSchemaError(PizzaValidatorError):
    """Raised by :meth:`PizzaSchema.parse` when the input violates a rule."""

    def __init__(self, issues: tuple[Issue, ...]) -> None:
        self.issues: tuple[Issue, ...] = issues
        super().__init__("; ".join(str(issue) for issue in issues))


# --- Input files -----------------------------------------------------------

class InputFileError(PizzaValidatorError):
    """Base for failures while loading the JSON document from disk."""

    def __init__(
        self, path: str | Path, message: str, *, detail: str | None = None,
    ) -> None:
        super().__init__(message, detail=detail)
        self.path: str = str(path)


class PizzaFileNotFoundError(InputFileError):
    """Raised when the input path does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f'Error: File "{path}" not found.')


class InvalidJSONError(InputFileError):
    """Raised when the file content is not valid JSON."""

    def __init__(self, path: str | Path, detail: str) -> None:
        super().__init__(
            path, f'Error: Invalid JSON in file "{path}".', detail=detail,
        )


class FileReadError(InputFileError):
    """Raised for any other read failure (permissions, encoding, etc.)."""

    def __init__(self, path: str | Path, detail: str) -> None:
        super().__init__(path, f'Error reading file "{path}":', detail=detail)


# --- Environment -----------------------------------------------------------

class MissingDependencyError(PizzaValidatorError):
    """Raised when an optional runtime dependency is not available."""
