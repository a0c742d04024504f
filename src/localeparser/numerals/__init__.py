"""Locale numeral glyphs: digit tables, minus signs, decimal separators.

Public API:
    build_digit_table - Ten digit glyphs of a locale
    resolve_signs - Extend a digit table with sign and separator glyphs
    get_numeral_symbols - Cached build with the default Babel formatter
    NumberFormatter - Protocol for substituting the formatting capability
"""

from .formatter import BabelNumberFormatter, NumberFormatter
from .tables import (
    DigitTable,
    NumeralSymbols,
    SignSeparatorSet,
    build_digit_table,
    clear_numeral_cache,
    get_numeral_symbols,
    resolve_signs,
)

__all__ = [
    "BabelNumberFormatter",
    "DigitTable",
    "NumberFormatter",
    "NumeralSymbols",
    "SignSeparatorSet",
    "build_digit_table",
    "clear_numeral_cache",
    "get_numeral_symbols",
    "resolve_signs",
]
