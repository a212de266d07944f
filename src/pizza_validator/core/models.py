"""Domain models for pizza-validator.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and serialisation.  They carry zero I/O and
are constructed fresh on every validation call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

Crust = Literal["stuffed", "normal"]

CRUSTS: tuple[str, ...] = ("stuffed", "normal")
"""Accepted crust values, in the order they are listed in messages."""

FORBIDDEN_TOPPINGS: tuple[str, ...] = ("spinach", "mushroom", "chicken", "turkey")
"""Toppings rejected regardless of case.  Order is the message order."""


# ---------------------------------------------------------------------------
# Pizza
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Pizza:
    """A validated, normalized pizza description."""

    size: int | float
    """Strictly positive size."""

    crust: Crust
    """Either ``"stuffed"`` or ``"normal"``."""

    is_deep_dish: bool = False
    """Deep-dish flag; ``False`` when the input omitted it."""

    toppings: tuple[str, ...] | None = None
    """Toppings in input order, or ``None`` when the input had none."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation.

        Keys follow the wire names (``isDeepDish``) and declaration
        order.  ``toppings`` is omitted entirely when absent.  An integral
        float size is written as an int, so ``14.0`` prints as ``14``.
        """
        size = self.size
        if isinstance(size, float) and size.is_integer():
            size = int(size)
        data: dict[str, Any] = {
            "size": size,
            "crust": self.crust,
            "isDeepDish": self.is_deep_dish,
        }
        if self.toppings is not None:
            data["toppings"] = list(self.toppings)
        return data


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Issue:
    """A single violated rule, located by its path inside the input."""

    path: tuple[str | int, ...]
    message: str

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{'.'.join(str(part) for part in self.path)}: {self.message}"


# ---------------------------------------------------------------------------
# Validation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidPizza:
    """Successful validation outcome."""

    pizza: Pizza
    valid: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class InvalidPizza:
    """Failed validation outcome.

    ``errors`` is the human-readable summary (one message per violated
    rule, joined with ``"; "``); ``issues`` keeps the structured form.
    """

    errors: str
    issues: tuple[Issue, ...] = ()
    valid: Literal[False] = field(default=False, init=False)


ValidationResult = Union[ValidPizza, InvalidPizza]
