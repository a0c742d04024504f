"""Locale-formatted numeric input: validation patterns and value parsing.

- Value parsing NEVER raises for bad input text - NaN/None sentinels
- Specification errors (static, caller-supplied) raise DigitSpecError

Public API:
    Validation:
        parse_digit_spec - "1.2-2" -> DigitSpec
        build_number_pattern - DigitSpec + locale -> NumberPattern

    Parsing Functions:
        parse_locale_number - Returns float | None (NaN on garbage)
        parse_locale_decimal - Returns Decimal | None (NaN on garbage)

    Type Guards:
        is_valid_number - TypeGuard for finite float
        is_valid_decimal - TypeGuard for finite Decimal

Example:
    >>> from localeparser.parsing import build_number_pattern, parse_locale_number
    >>> pattern = build_number_pattern("de_DE", "1.2-2")
    >>> if pattern.matches("12,34"):
    ...     value = parse_locale_number("12,34", "de_DE")
"""

from .digit_spec import DigitSpec, parse_digit_spec
from .guards import is_valid_decimal, is_valid_number
from .numbers import parse_locale_decimal, parse_locale_number
from .patterns import NumberPattern, build_number_pattern, number_pattern_source

__all__ = [
    # Validation
    "DigitSpec",
    "NumberPattern",
    "build_number_pattern",
    "number_pattern_source",
    "parse_digit_spec",
    # Type guards
    "is_valid_decimal",
    "is_valid_number",
    # Parsing functions
    "parse_locale_decimal",
    "parse_locale_number",
]
