"""Core layer — pure models and validation rules.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Validation never raises; failures are returned as data.
"""

from pizza_validator.core.models import (
    CRUSTS,
    FORBIDDEN_TOPPINGS,
    InvalidPizza,
    Issue,
    Pizza,
    ValidationResult,
    ValidPizza,
)
from pizza_validator.core.schema import PIZZA_SCHEMA, FieldSpec, PizzaSchema
from pizza_validator.core.validation import validate_pizza

__all__: list[str] = [
    "CRUSTS",
    "FORBIDDEN_TOPPINGS",
    "PIZZA_SCHEMA",
    "FieldSpec",
    "InvalidPizza",
    "Issue",
    "Pizza",
    "PizzaSchema",
    "ValidPizza",
    "ValidationResult",
    "validate_pizza",
]
