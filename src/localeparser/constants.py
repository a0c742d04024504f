"""Shared constants for localeparser.

This module provides centralized configuration constants used across
the numerals and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Digit-spec defaults: Bounds used when a digit-count specification omits a part
- Locale heuristics: Reference values used to derive locale glyphs
- Cache limits: Memory bounds for the per-locale symbol cache
- Numbering systems: CLDR digit glyphs per numbering system
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Digit-spec defaults
    "DEFAULT_MIN_INTEGER_DIGITS",
    "DEFAULT_MIN_FRACTION_DIGITS",
    "DEFAULT_MAX_FRACTION_DIGITS",
    "DIGIT_SPEC_PATTERN",
    # Locale heuristics
    "ASCII_DIGITS",
    "ASCII_MINUS_SIGN",
    "ASCII_DECIMAL_SEPARATOR",
    "RIGHT_TO_LEFT_MARK",
    "SIGN_REFERENCE_VALUE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Numbering systems
    "NUMBERING_SYSTEM_DIGITS",
]

# ============================================================================
# DIGIT-SPEC DEFAULTS
# ============================================================================

DEFAULT_MIN_INTEGER_DIGITS: int = 1
DEFAULT_MIN_FRACTION_DIGITS: int = 0
DEFAULT_MAX_FRACTION_DIGITS: int = 3

# {minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}, every part optional.
# Groups: 1 = min integer, 3 = min fraction, 5 = max fraction.
DIGIT_SPEC_PATTERN: re.Pattern[str] = re.compile(
    r"^(\d+)?\.((\d+)(-(\d+))?)?$", re.ASCII
)

# ============================================================================
# LOCALE HEURISTICS
# ============================================================================

ASCII_DIGITS: tuple[str, ...] = tuple("0123456789")
ASCII_MINUS_SIGN: str = "-"
ASCII_DECIMAL_SEPARATOR: str = "."

# Right-to-left layouts prefix the signed rendering with this mark.
RIGHT_TO_LEFT_MARK: str = "\u200f"

# Rendered with exactly one fraction digit to expose sign and separator glyphs.
# Left-to-right layout: "-0.9" (sign at 0, separator at 2).
SIGN_REFERENCE_VALUE: float = -0.9

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of locales whose numeral symbols are kept in memory.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# NUMBERING SYSTEMS
# ============================================================================


def _run(zero: int) -> str:
    return "".join(chr(zero + offset) for offset in range(10))


# CLDR numeric numbering systems (numberingSystems.xml, type="numeric").
# Algorithmic systems (roman, hebr, ...) are not decimal and are omitted.
NUMBERING_SYSTEM_DIGITS: dict[str, str] = {
    "adlm": _run(0x1E950),
    "ahom": _run(0x11730),
    "arab": _run(0x0660),
    "arabext": _run(0x06F0),
    "bali": _run(0x1B50),
    "beng": _run(0x09E6),
    "bhks": _run(0x11C50),
    "brah": _run(0x11066),
    "cakm": _run(0x11136),
    "cham": _run(0xAA50),
    "deva": _run(0x0966),
    "diak": _run(0x11950),
    "fullwide": _run(0xFF10),
    "gonm": _run(0x11D50),
    "gujr": _run(0x0AE6),
    "guru": _run(0x0A66),
    "hanidec": "〇一二三四五六七八九",
    "hmng": _run(0x16B50),
    "hmnp": _run(0x1E140),
    "java": _run(0xA9D0),
    "kali": _run(0xA900),
    "kawi": _run(0x11F50),
    "khmr": _run(0x17E0),
    "knda": _run(0x0CE6),
    "lana": _run(0x1A80),
    "lanatham": _run(0x1A90),
    "laoo": _run(0x0ED0),
    "latn": _run(0x0030),
    "lepc": _run(0x1C40),
    "limb": _run(0x1946),
    "mathbold": _run(0x1D7CE),
    "mathdbl": _run(0x1D7D8),
    "mathmono": _run(0x1D7F6),
    "mathsanb": _run(0x1D7EC),
    "mathsans": _run(0x1D7E2),
    "mlym": _run(0x0D66),
    "modi": _run(0x11650),
    "mong": _run(0x1810),
    "mroo": _run(0x16A60),
    "mtei": _run(0xABF0),
    "mymr": _run(0x1040),
    "mymrshan": _run(0x1090),
    "mymrtlng": _run(0xA9F0),
    "nagm": _run(0x1E4F0),
    "newa": _run(0x11450),
    "nkoo": _run(0x07C0),
    "olck": _run(0x1C50),
    "orya": _run(0x0B66),
    "osma": _run(0x104A0),
    "rohg": _run(0x10D30),
    "saur": _run(0xA8D0),
    "segment": _run(0x1FBF0),
    "shrd": _run(0x111D0),
    "sind": _run(0x112F0),
    "sora": _run(0x110F0),
    "sund": _run(0x1BB0),
    "takr": _run(0x116C0),
    "talu": _run(0x19D0),
    "tamldec": _run(0x0BE6),
    "telu": _run(0x0C66),
    "thai": _run(0x0E50),
    "tibt": _run(0x0F20),
    "tirh": _run(0x114D0),
    "tnsa": _run(0x16AC0),
    "vaii": _run(0xA620),
    "wara": _run(0x118E0),
    "wcho": _run(0x1E2F0),
}
