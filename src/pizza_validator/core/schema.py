"""Pizza schema — explicit, field-by-field structural rules.

Every check in this module is a **pure** function of its input: no I/O,
no mutation, no shared mutable state.  Rules run in field-declaration
order and each contributes zero or more :class:`Issue` entries:

1. **size** — required finite real number, strictly positive.
2. **crust** — required, exactly ``"stuffed"`` or ``"normal"``.
3. **isDeepDish** — optional boolean, defaults to ``False``.
4. **toppings** — optional array of strings, none of which may match a
   forbidden topping (case-insensitive).

A field with the wrong type gets a single issue; its content checks are
skipped.  Input that is not a mapping at all yields one structural issue
with an empty path and no field checks run.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, cast

from pizza_validator.core.models import CRUSTS, FORBIDDEN_TOPPINGS, Issue, Pizza
from pizza_validator.exceptions import PizzaSchemaError


class _Missing:
    """Sentinel for a key that is absent from the input mapping."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()

_FORBIDDEN: frozenset[str] = frozenset(FORBIDDEN_TOPPINGS)

SIZE_MESSAGE = "pizza size must be a positive number"
CRUST_MESSAGE = 'crust must be either "stuffed" or "normal"'
TOPPINGS_MESSAGE = (
    f"the following toppings are invalid: {', '.join(FORBIDDEN_TOPPINGS)}."
)


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Static description of one schema field."""

    name: str
    """Wire name of the field (as it appears in the JSON document)."""

    kind: str
    """JSON type expected: ``number``, ``enum``, ``boolean`` or ``array``."""

    required: bool
    choices: tuple[str, ...] = ()
    default: Any = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def json_type_name(value: object) -> str:
    """Name the JSON type of *value* for use in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------

def _check_size(value: object) -> list[Issue]:
    if _is_number(value) and math.isfinite(value) and value > 0:  # type: ignore[arg-type, operator]
        return []
    return [Issue(("size",), SIZE_MESSAGE)]


def _check_crust(value: object) -> list[Issue]:
    if isinstance(value, str) and value in CRUSTS:
        return []
    return [Issue(("crust",), CRUST_MESSAGE)]


def _check_is_deep_dish(value: object) -> list[Issue]:
    if value is _MISSING or isinstance(value, bool):
        return []
    return [
        Issue(("isDeepDish",), f"expected boolean, received {json_type_name(value)}")
    ]


def _check_toppings(value: object) -> list[Issue]:
    if value is _MISSING:
        return []
    if not isinstance(value, (list, tuple)):
        return [
            Issue(("toppings",), f"expected array, received {json_type_name(value)}")
        ]

    issues = [
        Issue(("toppings", index), f"expected string, received {json_type_name(item)}")
        for index, item in enumerate(value)
        if not isinstance(item, str)
    ]
    if issues:
        return issues

    if any(topping.lower() in _FORBIDDEN for topping in value):
        return [Issue(("toppings",), TOPPINGS_MESSAGE)]
    return []


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class PizzaSchema:
    """The pizza rule set.

    Usage::

        PIZZA_SCHEMA.check({"size": 12, "crust": "normal"})   # -> []
        PIZZA_SCHEMA.parse({"size": 12, "crust": "normal"})   # -> Pizza(...)

    :meth:`parse` is the raw structural entry point and raises
    :class:`~pizza_validator.exceptions.PizzaSchemaError`;
    :func:`~pizza_validator.core.validation.validate_pizza` wraps it in
    a result union that never raises.
    """

    fields: tuple[FieldSpec, ...] = (
        FieldSpec("size", "number", required=True),
        FieldSpec("crust", "enum", required=True, choices=CRUSTS),
        FieldSpec("isDeepDish", "boolean", required=False, default=False),
        FieldSpec("toppings", "array", required=False),
    )

    forbidden_toppings: tuple[str, ...] = FORBIDDEN_TOPPINGS

    def check(self, value: object) -> list[Issue]:
        """Return every rule violation in *value*, in field order."""
        if not isinstance(value, Mapping):
            return [Issue((), f"expected an object, received {json_type_name(value)}")]

        issues: list[Issue] = []
        issues.extend(_check_size(value.get("size", _MISSING)))
        issues.extend(_check_crust(value.get("crust", _MISSING)))
        issues.extend(_check_is_deep_dish(value.get("isDeepDish", _MISSING)))
        issues.extend(_check_toppings(value.get("toppings", _MISSING)))
        return issues

    def parse(self, value: object) -> Pizza:
        """Return the normalized :class:`Pizza` or raise ``PizzaSchemaError``."""
        issues = self.check(value)
        if issues:
            raise PizzaSchemaError(tuple(issues))

        data = cast(Mapping[str, Any], value)
        toppings = data.get("toppings")
        return Pizza(
            size=data["size"],
            crust=data["crust"],
            is_deep_dish=data.get("isDeepDish", False),
            toppings=tuple(toppings) if toppings is not None else None,
        )


PIZZA_SCHEMA = PizzaSchema()
