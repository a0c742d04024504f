"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    _DIGIT_SPEC_HINT = (
        "Use {minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}, e.g. '1.2-2'"
    )

    @staticmethod
    def invalid_integer_literal(text: str, radix: int | None = None) -> Diagnostic:
        """Integer literal is not valid in the requested radix.

        Args:
            text: The literal that failed to parse
            radix: Radix requested by the caller (None for auto radix)

        Returns:
            Diagnostic for INVALID_INTEGER_LITERAL
        """
        msg = f"Invalid integer literal when parsing {text}"
        if radix is not None:
            msg = f"{msg} in base {radix}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INTEGER_LITERAL,
            message=msg,
        )

    @staticmethod
    def invalid_digit_spec(spec: str) -> Diagnostic:
        """Digit-count specification does not have the expected shape.

        Args:
            spec: The offending specification string

        Returns:
            Diagnostic for INVALID_DIGIT_SPEC
        """
        msg = f"{spec} is not a valid digit info for number"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIGIT_SPEC,
            message=msg,
            hint=ErrorTemplate._DIGIT_SPEC_HINT,
        )

    @staticmethod
    def digit_spec_fraction_range(spec: str, minimum: int, maximum: int) -> Diagnostic:
        """Maximum fraction digits lower than the minimum.

        Args:
            spec: The offending specification string
            minimum: Parsed minimum fraction digits
            maximum: Parsed (or defaulted) maximum fraction digits

        Returns:
            Diagnostic for DIGIT_SPEC_FRACTION_RANGE
        """
        msg = (
            f"{spec} is not a valid digit info for number: "
            f"max fraction digits {maximum} < min fraction digits {minimum}"
        )
        return Diagnostic(
            code=DiagnosticCode.DIGIT_SPEC_FRACTION_RANGE,
            message=msg,
            hint=f"Give an explicit maximum, e.g. '.{minimum}-{minimum}'",
        )

    @staticmethod
    def numeral_digit_count(locale_code: str, count: int) -> Diagnostic:
        """Digit table does not hold exactly ten glyphs.

        Args:
            locale_code: Locale the table was built for
            count: Number of glyphs supplied

        Returns:
            Diagnostic for NUMERAL_DIGIT_COUNT
        """
        msg = f"Digit table needs 10 glyphs, got {count}"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_DIGIT_COUNT,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def numeral_glyph_invalid(locale_code: str, digit: int, rendering: str) -> Diagnostic:
        """Formatter rendered a digit as something other than one character.

        Args:
            locale_code: Locale whose data is unusable
            digit: Digit value that was rendered
            rendering: What the formatter returned

        Returns:
            Diagnostic for NUMERAL_GLYPH_INVALID
        """
        msg = f"Digit {digit} renders as {rendering!r}, expected a single character"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_GLYPH_INVALID,
            message=msg,
            hint="The locale formatter does not render decimal numerals for this locale",
            locale_code=locale_code,
        )

    @staticmethod
    def numeral_symbol_unavailable(locale_code: str, rendering: str) -> Diagnostic:
        """Signed reference rendering too short to extract sign and separator.

        Args:
            locale_code: Locale whose data is unusable
            rendering: What the formatter returned for the reference value

        Returns:
            Diagnostic for NUMERAL_SYMBOL_UNAVAILABLE
        """
        msg = f"Cannot extract minus sign and decimal separator from {rendering!r}"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_SYMBOL_UNAVAILABLE,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def numeral_symbol_collision(locale_code: str, symbols: str) -> Diagnostic:
        """Digit, sign and separator glyphs are not pairwise distinct.

        Args:
            locale_code: Locale whose data is unusable
            symbols: The ten digits followed by sign and separator

        Returns:
            Diagnostic for NUMERAL_SYMBOL_COLLISION
        """
        msg = f"Numeral symbols {symbols!r} are not pairwise distinct"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_SYMBOL_COLLISION,
            message=msg,
            hint="Numbers in this locale cannot be parsed unambiguously",
            locale_code=locale_code,
        )
