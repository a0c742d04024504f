"""Diagnostic system for localeparser errors.

Provides structured error diagnostics with codes, hints and formatting.
Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DigitSpecError,
    IntegerLiteralError,
    LocaleParserError,
    NumeralDataError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DigitSpecError",
    "ErrorTemplate",
    "IntegerLiteralError",
    "LocaleParserError",
    "NumeralDataError",
    "OutputFormat",
]
