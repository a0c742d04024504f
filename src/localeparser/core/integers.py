"""Strict radix-aware integer literal parsing.

Reads the numeric fragments of digit-count specifications. Radix 10 and 16
accept only a complete, optionally signed literal; other radixes accept the
longest valid digit prefix and fail only when no digit can be read.
"""

import re

from localeparser.diagnostics import ErrorTemplate, IntegerLiteralError

__all__ = ["parse_int", "parse_int_auto_radix"]

_DECIMAL_LITERAL = re.compile(r"[+-]?[0-9]+", re.ASCII)
_HEX_LITERAL = re.compile(r"[+-]?[0-9A-Fa-f]+", re.ASCII)

_MIN_RADIX = 2
_MAX_RADIX = 36


def _digit_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return _MAX_RADIX


def _parse_prefix(text: str, radix: int) -> int | None:
    """Parse the longest leading integer in ``text``; None when nothing is read."""
    if not _MIN_RADIX <= radix <= _MAX_RADIX:
        return None

    rest = text.lstrip()
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]

    value = 0
    consumed = 0
    for ch in rest:
        digit = _digit_value(ch)
        if digit >= radix:
            break
        value = value * radix + digit
        consumed += 1

    if consumed == 0:
        return None
    return sign * value


def parse_int(text: str, radix: int) -> int:
    """Parse an integer literal in the given radix.

    Args:
        text: Literal to parse
        radix: Base of the literal (2-36)

    Returns:
        Parsed integer

    Raises:
        IntegerLiteralError: If text is not a valid literal in radix

    Example:
        >>> parse_int("-42", 10)
        -42
        >>> parse_int("ff", 16)
        255
        >>> parse_int("101zz", 2)
        5
    """
    if radix == 10:
        if _DECIMAL_LITERAL.fullmatch(text):
            return int(text, 10)
    elif radix == 16:
        if _HEX_LITERAL.fullmatch(text):
            return int(text, 16)
    else:
        result = _parse_prefix(text, radix)
        if result is not None:
            return result

    diagnostic = ErrorTemplate.invalid_integer_literal(text, radix)
    raise IntegerLiteralError(diagnostic, text=text, radix=radix)


def parse_int_auto_radix(text: str) -> int:
    """Parse the leading base-10 integer of ``text``.

    Raises:
        IntegerLiteralError: If no digit can be read
    """
    result = _parse_prefix(text, 10)
    if result is None:
        diagnostic = ErrorTemplate.invalid_integer_literal(text)
        raise IntegerLiteralError(diagnostic, text=text)
    return result
