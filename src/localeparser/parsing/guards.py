"""Type guard functions for parsing result type narrowing.

Both parse_locale_* functions return a value, NaN, or None.
Type guards check the result to narrow types for mypy.

Note: All guards accept None and return False.

Example:
    >>> from localeparser.parsing import parse_locale_number
    >>> result = parse_locale_number("12,5", "de_DE")
    >>> if is_valid_number(result):
    ...     # mypy knows result is float
    ...     total = result * 1.21
"""

import math
from decimal import Decimal
from typing import TypeGuard

__all__ = [
    "is_valid_decimal",
    "is_valid_number",
]


def is_valid_decimal(value: Decimal | None) -> TypeGuard[Decimal]:
    """Type guard: Check if parsed decimal is valid (not None/NaN/Infinity).

    Args:
        value: Result of parse_locale_decimal()

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return value is not None and value.is_finite()


def is_valid_number(value: float | None) -> TypeGuard[float]:
    """Type guard: Check if parsed number is valid (not None/NaN/Infinity).

    Args:
        value: Result of parse_locale_number()

    Returns:
        True if value is a finite float, False otherwise
    """
    return value is not None and math.isfinite(value)
