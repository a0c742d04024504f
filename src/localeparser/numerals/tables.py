"""Per-locale numeral tables: digit glyphs, minus sign, decimal separator.

Architecture:
    - DigitTable: The ten glyphs rendering digits 0-9 for a locale
    - SignSeparatorSet: A DigitTable plus minus sign and decimal separator
    - NumeralSymbols: Capability protocol consumed by the parsing layer.
      SignSeparatorSet is the decimal variant; further numeral
      representations satisfy the same protocol.

Glyphs are derived by rendering reference values through a NumberFormatter
(at most 11 calls per locale). Tables are immutable once built and safe to
share between threads. get_numeral_symbols() caches the default-formatter
build per locale, since the locale -> table mapping is pure.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Protocol

from localeparser.constants import (
    ASCII_DECIMAL_SEPARATOR,
    ASCII_DIGITS,
    ASCII_MINUS_SIGN,
    MAX_LOCALE_CACHE_SIZE,
    RIGHT_TO_LEFT_MARK,
    SIGN_REFERENCE_VALUE,
)
from localeparser.diagnostics import ErrorTemplate, NumeralDataError
from localeparser.locale_utils import normalize_locale

from .formatter import BabelNumberFormatter, NumberFormatter

__all__ = [
    "DigitTable",
    "NumeralSymbols",
    "SignSeparatorSet",
    "build_digit_table",
    "clear_numeral_cache",
    "get_numeral_symbols",
    "resolve_signs",
]

logger = logging.getLogger(__name__)

_DEFAULT_FORMATTER = BabelNumberFormatter()


class NumeralSymbols(Protocol):
    """Glyphs a locale uses to write decimal numbers."""

    @property
    def locale_code(self) -> str: ...

    @property
    def digits(self) -> tuple[str, ...]: ...

    @property
    def is_contiguous(self) -> bool: ...

    @property
    def minus_sign(self) -> str: ...

    @property
    def decimal_separator(self) -> str: ...

    def to_ascii(self, text: str) -> str | None: ...


@dataclass(frozen=True, slots=True)
class DigitTable:
    """Ten glyphs; ``digits[i]`` renders digit i.

    Attributes:
        locale_code: Locale the table was built for
        digits: Exactly ten single-character glyphs
    """

    locale_code: str
    digits: tuple[str, ...] = ASCII_DIGITS

    def __post_init__(self) -> None:
        if len(self.digits) != len(ASCII_DIGITS):
            diagnostic = ErrorTemplate.numeral_digit_count(self.locale_code, len(self.digits))
            raise NumeralDataError(diagnostic, locale_code=self.locale_code)
        for value, glyph in enumerate(self.digits):
            if len(glyph) != 1:
                diagnostic = ErrorTemplate.numeral_glyph_invalid(self.locale_code, value, glyph)
                raise NumeralDataError(diagnostic, locale_code=self.locale_code)

    @property
    def is_contiguous(self) -> bool:
        """True when the glyphs are ten consecutive code points in order."""
        start = ord(self.digits[0])
        return all(ord(glyph) == start + value for value, glyph in enumerate(self.digits))


@dataclass(frozen=True, slots=True)
class SignSeparatorSet:
    """Digit table extended with the locale's minus sign and decimal separator.

    All twelve glyphs are single characters and pairwise distinct, so every
    character of a locale-formatted number has exactly one meaning.

    Attributes:
        digit_table: Digit glyphs of the locale
        minus_sign: Glyph marking a negative number
        decimal_separator: Glyph between integer and fraction digits
    """

    digit_table: DigitTable
    minus_sign: str = ASCII_MINUS_SIGN
    decimal_separator: str = ASCII_DECIMAL_SEPARATOR
    _to_ascii: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        glyphs = (*self.digit_table.digits, self.minus_sign, self.decimal_separator)
        if any(len(glyph) != 1 for glyph in glyphs) or len(set(glyphs)) != len(glyphs):
            diagnostic = ErrorTemplate.numeral_symbol_collision(self.locale_code, "".join(glyphs))
            raise NumeralDataError(diagnostic, locale_code=self.locale_code)

        mapping = dict(zip(self.digit_table.digits, ASCII_DIGITS, strict=True))
        mapping[self.minus_sign] = ASCII_MINUS_SIGN
        mapping[self.decimal_separator] = ASCII_DECIMAL_SEPARATOR
        object.__setattr__(self, "_to_ascii", mapping)

    @property
    def locale_code(self) -> str:
        return self.digit_table.locale_code

    @property
    def digits(self) -> tuple[str, ...]:
        return self.digit_table.digits

    @property
    def is_contiguous(self) -> bool:
        return self.digit_table.is_contiguous

    def to_ascii(self, text: str) -> str | None:
        """Map locale glyphs to ASCII digits, '-' and '.'.

        Returns:
            The ASCII rendering, or None as soon as a character is not one of
            the locale's digit, sign or separator glyphs

        Example:
            >>> symbols = SignSeparatorSet(DigitTable("de_DE"), "-", ",")
            >>> symbols.to_ascii("-12,5")
            '-12.5'
            >>> symbols.to_ascii("1.234,5") is None
            True
        """
        chars: list[str] = []
        for ch in text:
            mapped = self._to_ascii.get(ch)
            if mapped is None:
                return None
            chars.append(mapped)
        return "".join(chars)


def build_digit_table(
    locale_code: str,
    formatter: NumberFormatter | None = None,
) -> DigitTable:
    """Build the digit table of a locale.

    Starts from ASCII '0'-'9'. If the formatter supports the locale, digit i
    is the rendering of the integer i with zero fraction digits.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)
        formatter: Formatting capability (defaults to BabelNumberFormatter)

    Returns:
        DigitTable for the locale

    Raises:
        NumeralDataError: If a digit does not render as exactly one character
    """
    if formatter is None:
        formatter = _DEFAULT_FORMATTER
    if not formatter.supports_extended_numerals(locale_code):
        logger.debug("Locale '%s' has no numeral data; using ASCII digits", locale_code)
        return DigitTable(locale_code)

    digits = tuple(
        formatter.format_number(locale_code, value, 0, 0) for value in range(len(ASCII_DIGITS))
    )
    return DigitTable(locale_code, digits)


def resolve_signs(
    locale_code: str,
    digit_table: DigitTable,
    formatter: NumberFormatter | None = None,
) -> SignSeparatorSet:
    """Extend a digit table with the locale's minus sign and decimal separator.

    Renders -0.9 with exactly one fraction digit. When the rendering starts
    with RIGHT-TO-LEFT MARK the sign is at index 1, otherwise at index 0.
    The decimal separator is two positions after the sign.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)
        digit_table: Digit glyphs of the same locale
        formatter: Formatting capability (defaults to BabelNumberFormatter)

    Returns:
        SignSeparatorSet for the locale

    Raises:
        NumeralDataError: If the rendering is too short for the fixed offsets,
            or the extracted glyphs collide with digits or each other

    Example:
        >>> symbols = resolve_signs("de_DE", build_digit_table("de_DE"))
        >>> symbols.minus_sign, symbols.decimal_separator
        ('-', ',')
    """
    if formatter is None:
        formatter = _DEFAULT_FORMATTER
    if not formatter.supports_extended_numerals(locale_code):
        return SignSeparatorSet(digit_table)

    rendered = formatter.format_number(locale_code, SIGN_REFERENCE_VALUE, 1, 1)
    index = 1 if rendered[:1] == RIGHT_TO_LEFT_MARK else 0
    if len(rendered) <= index + 2:
        diagnostic = ErrorTemplate.numeral_symbol_unavailable(locale_code, rendered)
        raise NumeralDataError(diagnostic, locale_code=locale_code)

    return SignSeparatorSet(digit_table, rendered[index], rendered[index + 2])


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _cached_symbols(cache_key: str) -> SignSeparatorSet:
    digit_table = build_digit_table(cache_key)
    symbols = resolve_signs(cache_key, digit_table)
    logger.debug(
        "Built numeral symbols for '%s': digits=%s minus=%r separator=%r",
        cache_key,
        "".join(symbols.digits),
        symbols.minus_sign,
        symbols.decimal_separator,
    )
    return symbols


def get_numeral_symbols(locale_code: str) -> SignSeparatorSet:
    """Get the numeral symbols of a locale, built once and cached.

    Uses the default BabelNumberFormatter. "en-US" and "en_US" share an entry.
    Thread-safe via lru_cache internal locking.
    """
    return _cached_symbols(normalize_locale(locale_code))


def clear_numeral_cache() -> None:
    """Clear cached numeral symbols (used by tests to reset state)."""
    _cached_symbols.cache_clear()
