"""Locale-aware validation patterns for numeric input.

build_number_pattern() compiles a regular expression over a locale's own
glyphs that accepts exactly the numbers allowed by a digit-count
specification. Three shapes, by fraction bounds:

    min > 0, max > 0   m? D{int,} s D{min,max}      separator mandatory
    min == 0, max > 0  m? D{int,} (s D{0,max})?     separator optional
    max == 0           m? D{int,}                   integers only

where m is the minus sign, s the decimal separator and D the digit class.
No grouping separators are accepted.
"""

import logging
import re
from dataclasses import dataclass

from localeparser.numerals import NumeralSymbols, get_numeral_symbols

from .digit_spec import DigitSpec, parse_digit_spec

__all__ = ["NumberPattern", "build_number_pattern", "number_pattern_source"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumberPattern:
    """Compiled validator for locale-formatted numbers.

    Attributes:
        digit_spec: Digit bounds the pattern enforces
        symbols: Locale glyphs the pattern is written in
        regex: Compiled, whole-string anchored expression
    """

    digit_spec: DigitSpec
    symbols: NumeralSymbols
    regex: re.Pattern[str]

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    def matches(self, text: str) -> bool:
        """Return True if text is a number accepted by this pattern."""
        return self.regex.fullmatch(text) is not None


def _digit_class(symbols: NumeralSymbols) -> str:
    digits = symbols.digits
    if symbols.is_contiguous:
        return f"[{re.escape(digits[0])}-{re.escape(digits[9])}]"
    logger.debug(
        "Digits of '%s' are not consecutive code points; enumerating them",
        symbols.locale_code,
    )
    return "[" + "".join(re.escape(glyph) for glyph in digits) + "]"


def number_pattern_source(spec: DigitSpec, symbols: NumeralSymbols) -> str:
    """Assemble the expression source for spec written in the given glyphs.

    Example:
        >>> from localeparser.numerals import DigitTable, SignSeparatorSet
        >>> number_pattern_source(DigitSpec(1, 2, 2), SignSeparatorSet(DigitTable("en")))
        '^\\\\-?[0-9]{1,}\\\\.[0-9]{2,2}\\\\Z'
    """
    digit = _digit_class(symbols)
    minus = re.escape(symbols.minus_sign)
    separator = re.escape(symbols.decimal_separator)
    integer_part = f"{minus}?{digit}{{{spec.min_integer_digits},}}"

    if spec.min_fraction_digits > 0 and spec.max_fraction_digits > 0:
        fraction = f"{digit}{{{spec.min_fraction_digits},{spec.max_fraction_digits}}}"
        return f"^{integer_part}{separator}{fraction}\\Z"
    if spec.min_fraction_digits == 0 and spec.max_fraction_digits > 0:
        fraction = f"{digit}{{0,{spec.max_fraction_digits}}}"
        return f"^{integer_part}(?:{separator}{fraction})?\\Z"
    return f"^{integer_part}\\Z"


def build_number_pattern(
    locale_code: str,
    digit_spec: str | DigitSpec | None = None,
    *,
    symbols: NumeralSymbols | None = None,
) -> NumberPattern:
    """Build a validator for numbers written in a locale.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)
        digit_spec: Specification string such as "1.2-2", a DigitSpec, or
            None for the defaults (1.0-3)
        symbols: Pre-built numeral symbols; defaults to the cached symbols
            of locale_code

    Returns:
        NumberPattern accepting exactly the numbers allowed by digit_spec

    Raises:
        DigitSpecError: If digit_spec is a malformed specification string
        NumeralDataError: If the locale's numeral data is unusable

    Examples:
        >>> pattern = build_number_pattern("en_US", "1.2-2")
        >>> pattern.matches("-12.34"), pattern.matches("12.3")
        (True, False)

        >>> pattern = build_number_pattern("de_DE", "1.0-0")
        >>> pattern.matches("-12"), pattern.matches("12,3")
        (True, False)
    """
    spec = digit_spec if isinstance(digit_spec, DigitSpec) else parse_digit_spec(digit_spec)
    if symbols is None:
        symbols = get_numeral_symbols(locale_code)
    return NumberPattern(spec, symbols, re.compile(number_pattern_source(spec, symbols)))
