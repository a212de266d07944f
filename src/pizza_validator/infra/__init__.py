"""Infrastructure layer — filesystem and JSON decoding.

Every raw ``OSError`` / ``ValueError`` must be caught here and re-raised
as a :class:`~pizza_validator.exceptions.PizzaValidatorError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from pizza_validator.infra.json_loader import load_json_file, read_text

__all__: list[str] = ["load_json_file", "read_text"]
