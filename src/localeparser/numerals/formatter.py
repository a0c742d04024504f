"""Locale number formatting capability.

The digit table and sign/separator resolvers derive every glyph by rendering
reference values through a NumberFormatter. BabelNumberFormatter is the
default implementation, backed by CLDR data.

Architecture:
    - NumberFormatter: Protocol consumed by numerals.tables
    - BabelNumberFormatter: CLDR-based implementation (thread-safe, stateless)

A locale is supported when Babel knows it. Renderings use the locale's
default numbering system for symbols, and its native digit glyphs.
"""

from __future__ import annotations

import functools
import logging
from decimal import Decimal
from typing import Protocol

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from localeparser.constants import ASCII_DIGITS, ASCII_MINUS_SIGN, NUMBERING_SYSTEM_DIGITS
from localeparser.locale_utils import get_babel_locale

__all__ = ["BabelNumberFormatter", "NumberFormatter", "decimal_pattern"]

logger = logging.getLogger(__name__)


# pylint: disable=unnecessary-ellipsis
class NumberFormatter(Protocol):
    """Locale formatting capability required to build numeral tables."""

    def supports_extended_numerals(self, locale_code: str) -> bool:
        """Return True if the locale has its own numeral rendering."""
        ...

    def format_number(
        self,
        locale_code: str,
        value: int | float | Decimal,
        min_fraction_digits: int,
        max_fraction_digits: int,
    ) -> str:
        """Render value with the given fraction-digit bounds, without grouping."""
        ...
# pylint: enable=unnecessary-ellipsis


def decimal_pattern(min_fraction_digits: int, max_fraction_digits: int) -> str:
    """Build a CLDR decimal pattern for the given fraction-digit bounds.

    Example:
        >>> decimal_pattern(0, 0)
        '0'
        >>> decimal_pattern(1, 3)
        '0.0##'
    """
    if max_fraction_digits <= 0:
        return "0"
    optional = max(max_fraction_digits - min_fraction_digits, 0)
    return "0." + "0" * min_fraction_digits + "#" * optional


class BabelNumberFormatter:
    """NumberFormatter backed by Babel's CLDR data.

    Examples:
        >>> formatter = BabelNumberFormatter()
        >>> formatter.format_number("de_DE", -0.9, 1, 1)
        '-0,9'
        >>> formatter.supports_extended_numerals("xx_YY")
        False
    """

    __slots__ = ()

    def supports_extended_numerals(self, locale_code: str) -> bool:
        if not locale_code:
            return False
        try:
            get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            logger.debug("Locale '%s' unavailable (%s); using ASCII numerals", locale_code, e)
            return False
        return True

    def format_number(
        self,
        locale_code: str,
        value: int | float | Decimal,
        min_fraction_digits: int,
        max_fraction_digits: int,
    ) -> str:
        locale = get_babel_locale(locale_code)
        numbering_system = locale.default_numbering_system
        rendered = babel_numbers.format_decimal(
            value,
            format=decimal_pattern(min_fraction_digits, max_fraction_digits),
            locale=locale,
            group_separator=False,
            numbering_system=numbering_system,
        )
        rendered = rendered.translate(_glyph_translation(locale_code, numbering_system))
        # Explicit patterns carry an ASCII hyphen; CLDR minus signs may differ
        # (U+2212, or prefixed with a bidi mark).
        if rendered.startswith(ASCII_MINUS_SIGN):
            minus_sign = babel_numbers.get_minus_sign_symbol(
                locale, numbering_system=numbering_system
            )
            rendered = minus_sign + rendered[1:]
        return rendered


@functools.lru_cache(maxsize=64)
def _glyph_translation(locale_code: str, numbering_system: str) -> dict[int, str]:
    glyphs = NUMBERING_SYSTEM_DIGITS.get(numbering_system)
    if glyphs is None:
        logger.warning(
            "No digit glyphs for numbering system '%s' (locale '%s'); using ASCII digits",
            numbering_system,
            locale_code,
        )
        glyphs = "".join(ASCII_DIGITS)
    return str.maketrans("".join(ASCII_DIGITS), glyphs)
