"""Library entry point: validate an arbitrary value as a pizza.

:func:`validate_pizza` never raises.  Every failure is returned as an
:class:`~pizza_validator.core.models.InvalidPizza` so callers branch on
``result.valid`` instead of catching exceptions.
"""

from __future__ import annotations

import logging

from pizza_validator.core.models import InvalidPizza, ValidationResult, ValidPizza
from pizza_validator.core.schema import PIZZA_SCHEMA
from pizza_validator.exceptions import PizzaSchemaError

logger = logging.getLogger(__name__)


def validate_pizza(value: object) -> ValidationResult:
    """Validate *value* and return the normalized pizza or the joined errors."""
    try:
        pizza = PIZZA_SCHEMA.parse(value)
    except PizzaSchemaError as exc:
        logger.debug("pizza rejected with %d issue(s)", len(exc.issues))
        return InvalidPizza(errors=str(exc), issues=exc.issues)

    logger.debug("pizza accepted: %r", pizza)
    return ValidPizza(pizza=pizza)
