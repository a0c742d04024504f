"""Core utilities shared by the numerals and parsing layers.

Exports:
    parse_int: Strict radix-aware integer literal parsing
    parse_int_auto_radix: Base-10 integer literal parsing
"""

from .integers import parse_int, parse_int_auto_radix

__all__ = ["parse_int", "parse_int_auto_radix"]
