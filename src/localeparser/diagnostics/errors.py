"""localeparser exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DigitSpecError",
    "IntegerLiteralError",
    "LocaleParserError",
    "NumeralDataError",
]


class LocaleParserError(Exception):
    """Base exception for all localeparser errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleParserError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DigitSpecError(LocaleParserError, ValueError):
    """Digit-count specification is malformed.

    Raised for static, caller-supplied specifications, so it indicates a
    programming error rather than bad user input.

    Attributes:
        spec: The offending specification string
    """

    def __init__(self, message: str | Diagnostic, *, spec: str = "") -> None:
        super().__init__(message)
        self.spec = spec


class IntegerLiteralError(LocaleParserError, ValueError):
    """Text is not a valid integer literal in the requested radix.

    Attributes:
        text: The literal that failed to parse
        radix: Requested radix (None for auto radix)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        text: str = "",
        radix: int | None = None,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.radix = radix


class NumeralDataError(LocaleParserError):
    """Locale formatter produced glyph data that cannot drive parsing.

    Attributes:
        locale_code: The locale whose data is unusable
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code
