"""localeparser - Locale-aware numeric input validation and parsing.

Converts numbers written with a locale's own digit glyphs, minus sign and
decimal separator into Python values, and builds validation patterns that
accept only numbers matching a digit-count specification.

Public API:
    build_number_pattern - Validator for "{minInt}.{minFraction}-{maxFraction}"
    parse_locale_number - Locale text -> float (NaN on garbage, None on empty)
    parse_locale_decimal - Locale text -> Decimal (financial precision)
    parse_digit_spec - Specification string -> DigitSpec

Exceptions:
    LocaleParserError - Base exception class
    DigitSpecError - Malformed digit-count specification
    IntegerLiteralError - Malformed integer literal
    NumeralDataError - Unusable locale numeral data

Submodules:
    localeparser.numerals - Digit tables, sign/separator resolution, formatter protocol
    localeparser.parsing - Patterns, value parsing, type guards
    localeparser.diagnostics - Error types and diagnostic formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    DigitSpecError,
    IntegerLiteralError,
    LocaleParserError,
    NumeralDataError,
)
from .parsing import (
    DigitSpec,
    NumberPattern,
    build_number_pattern,
    is_valid_decimal,
    is_valid_number,
    parse_digit_spec,
    parse_locale_decimal,
    parse_locale_number,
)

try:
    __version__ = _get_version("localeparser")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DigitSpec",
    "DigitSpecError",
    "IntegerLiteralError",
    "LocaleParserError",
    "NumberPattern",
    "NumeralDataError",
    "__version__",
    "build_number_pattern",
    "is_valid_decimal",
    "is_valid_number",
    "parse_digit_spec",
    "parse_locale_decimal",
    "parse_locale_number",
]
