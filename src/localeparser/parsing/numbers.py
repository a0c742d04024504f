"""Locale-formatted number parsing.

- parse_locale_number() returns float | None
- parse_locale_decimal() returns Decimal | None
- Never raises for bad input text: NaN signals garbage, None signals nothing

Every character must be one of the locale's digit, minus sign or decimal
separator glyphs; the first other character (grouping separators included)
rejects the whole input. No partial results.

Thread-safe. Numeral symbols are immutable and cached per locale.
"""

import math
from decimal import Decimal, InvalidOperation

from localeparser.numerals import NumeralSymbols, get_numeral_symbols

__all__ = ["parse_locale_decimal", "parse_locale_number"]


def parse_locale_number(
    text: str | None,
    locale_code: str | None,
    *,
    symbols: NumeralSymbols | None = None,
) -> float | None:
    """Parse a locale-formatted number to float.

    Args:
        text: Number written with the locale's glyphs (e.g., "-12,5" for de_DE)
        locale_code: Locale identifier (BCP-47 or POSIX)
        symbols: Pre-built numeral symbols; defaults to the cached symbols
            of locale_code

    Returns:
        - The parsed value
        - None if text or locale_code is empty
        - math.nan if text contains a foreign character or is not a
          well-formed number (e.g., two separators, lone minus sign)

    Raises:
        NumeralDataError: If the locale's numeral data is unusable

    Examples:
        >>> parse_locale_number("-12,5", "de_DE")
        -12.5
        >>> parse_locale_number("", "de_DE") is None
        True
        >>> parse_locale_number("1.234,5", "de_DE")
        nan

    Thread Safety:
        Thread-safe. No shared mutable state.
    """
    if not text or not locale_code:
        return None

    if symbols is None:
        symbols = get_numeral_symbols(locale_code)

    ascii_text = symbols.to_ascii(text)
    if ascii_text is None:
        return math.nan
    try:
        return float(ascii_text)
    except ValueError:
        return math.nan


def parse_locale_decimal(
    text: str | None,
    locale_code: str | None,
    *,
    symbols: NumeralSymbols | None = None,
) -> Decimal | None:
    """Parse a locale-formatted number to Decimal (financial precision).

    Same acceptance rules and sentinels as parse_locale_number(), with
    Decimal("NaN") as the not-a-number sentinel.

    Examples:
        >>> parse_locale_decimal("100,50", "de_DE")
        Decimal('100.50')
        >>> parse_locale_decimal("1,2,3", "de_DE")
        Decimal('NaN')
    """
    if not text or not locale_code:
        return None

    if symbols is None:
        symbols = get_numeral_symbols(locale_code)

    ascii_text = symbols.to_ascii(text)
    if ascii_text is None:
        return Decimal("NaN")
    try:
        return Decimal(ascii_text)
    except InvalidOperation:
        return Decimal("NaN")
