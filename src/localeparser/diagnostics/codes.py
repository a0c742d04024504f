"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Specification errors (digit-count specs, integer literals)
        2000-2999: Locale data errors (unusable glyphs from the formatter)
    """

    # Specification errors (1000-1999)
    INVALID_INTEGER_LITERAL = 1001
    INVALID_DIGIT_SPEC = 1002
    DIGIT_SPEC_FRACTION_RANGE = 1003

    # Locale data errors (2000-2999)
    NUMERAL_GLYPH_INVALID = 2001
    NUMERAL_SYMBOL_UNAVAILABLE = 2002
    NUMERAL_SYMBOL_COLLISION = 2003
    NUMERAL_DIGIT_COUNT = 2004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale involved in the error (locale data errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_DIGIT_SPEC]: abc is not a valid digit info for number
              = help: Use {minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
