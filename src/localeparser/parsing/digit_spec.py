"""Digit-count specification parsing.

A digit-count specification is a compact string
``{minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}`` where every
part is optional: "1.2-2", ".0-0", "3.", ".1".
"""

from dataclasses import dataclass

from localeparser.constants import (
    DEFAULT_MAX_FRACTION_DIGITS,
    DEFAULT_MIN_FRACTION_DIGITS,
    DEFAULT_MIN_INTEGER_DIGITS,
    DIGIT_SPEC_PATTERN,
)
from localeparser.core import parse_int_auto_radix
from localeparser.diagnostics import DigitSpecError, ErrorTemplate

__all__ = ["DigitSpec", "parse_digit_spec"]


@dataclass(frozen=True, slots=True)
class DigitSpec:
    """Integer and fraction digit bounds of a numeric input.

    Attributes:
        min_integer_digits: Fewest digits before the separator
        min_fraction_digits: Fewest digits after the separator
        max_fraction_digits: Most digits after the separator (0 = integers only)
    """

    min_integer_digits: int = DEFAULT_MIN_INTEGER_DIGITS
    min_fraction_digits: int = DEFAULT_MIN_FRACTION_DIGITS
    max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS

    def __str__(self) -> str:
        return (
            f"{self.min_integer_digits}.{self.min_fraction_digits}"
            f"-{self.max_fraction_digits}"
        )


def parse_digit_spec(spec: str | None) -> DigitSpec:
    """Parse a digit-count specification.

    Args:
        spec: Specification string; None or "" selects the defaults

    Returns:
        DigitSpec with absent parts defaulted (1, 0, 3)

    Raises:
        DigitSpecError: If spec does not have the specification shape, or its
            maximum fraction digits are below the minimum

    Example:
        >>> parse_digit_spec("1.2-2")
        DigitSpec(min_integer_digits=1, min_fraction_digits=2, max_fraction_digits=2)
        >>> parse_digit_spec(None)
        DigitSpec(min_integer_digits=1, min_fraction_digits=0, max_fraction_digits=3)
    """
    if not spec:
        return DigitSpec()

    parts = DIGIT_SPEC_PATTERN.fullmatch(spec)
    if parts is None:
        raise DigitSpecError(ErrorTemplate.invalid_digit_spec(spec), spec=spec)

    min_int, _, min_fraction, _, max_fraction = parts.groups()
    result = DigitSpec(
        min_integer_digits=(
            parse_int_auto_radix(min_int) if min_int is not None else DEFAULT_MIN_INTEGER_DIGITS
        ),
        min_fraction_digits=(
            parse_int_auto_radix(min_fraction)
            if min_fraction is not None
            else DEFAULT_MIN_FRACTION_DIGITS
        ),
        max_fraction_digits=(
            parse_int_auto_radix(max_fraction)
            if max_fraction is not None
            else DEFAULT_MAX_FRACTION_DIGITS
        ),
    )

    if result.max_fraction_digits < result.min_fraction_digits:
        diagnostic = ErrorTemplate.digit_spec_fraction_range(
            spec, result.min_fraction_digits, result.max_fraction_digits
        )
        raise DigitSpecError(diagnostic, spec=spec)
    return result
