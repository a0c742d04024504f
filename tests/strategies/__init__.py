"""Hypothesis strategies for localeparser property-based testing.

Usage:
    from tests.strategies import digit_specs, spec_conforming_texts
"""

from .numerals import (
    ascii_number_texts,
    digit_specs,
    foreign_characters,
    spec_conforming_texts,
)

__all__ = [
    "ascii_number_texts",
    "digit_specs",
    "foreign_characters",
    "spec_conforming_texts",
]
