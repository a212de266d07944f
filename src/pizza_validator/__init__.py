"""pizza-validator — check that a JSON document describes a valid pizza.

The library surface is :func:`validate_pizza` plus the schema it runs
(:data:`PIZZA_SCHEMA`) for callers that want raw structural parsing.
"""

from pizza_validator.core import (
    FORBIDDEN_TOPPINGS,
    PIZZA_SCHEMA,
    InvalidPizza,
    Issue,
    Pizza,
    PizzaSchema,
    ValidationResult,
    ValidPizza,
    validate_pizza,
)
from pizza_validator.exceptions import PizzaSchemaError
from pizza_validator.version import __version__

__all__: list[str] = [
    "FORBIDDEN_TOPPINGS",
    "PIZZA_SCHEMA",
    "InvalidPizza",
    "Issue",
    "Pizza",
    "PizzaSchema",
    "PizzaSchemaError",
    "ValidPizza",
    "ValidationResult",
    "__version__",
    "validate_pizza",
]
