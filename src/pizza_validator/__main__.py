"""Allow ``python -m pizza_validator`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m pizza_validator`` behaves identically to the
``pizza-validator`` console script.
"""

from __future__ import annotations

from pizza_validator.cli.app import cli

if __name__ == "__main__":
    cli()
