"""Shared constants for numparse.

This module provides the grammar constants used by the integer and
floating-point engines. Placing them here gives one source of truth for
radix bounds and the characters the engines recognize.

Constants are grouped by domain:
- Radix: Bounds and defaults for digit interpretation
- Literal syntax: Sign, prefix, decimal point and exponent characters
- Digits: The ASCII digit alphabet shared by every radix

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Radix
    "MIN_RADIX",
    "MAX_RADIX",
    "DEFAULT_RADIX",
    "HEX_RADIX",
    # Literal syntax
    "SIGN_CHARS",
    "NEGATIVE_SIGN",
    "ZERO_DIGIT",
    "HEX_PREFIX_MARKERS",
    "DECIMAL_POINT",
    "EXPONENT_MARKERS",
    # Digits
    "DIGIT_ALPHABET",
]

# ============================================================================
# RADIX
# ============================================================================

# Digits 0-9 plus a-z give 36 symbols, so 36 is the largest usable base.
MIN_RADIX: int = 2
MAX_RADIX: int = 36

# Radix used when the caller gives none and the literal has no 0x prefix.
DEFAULT_RADIX: int = 10

# Radix forced by a leading 0x / 0X when radix inference is active.
HEX_RADIX: int = 16

# ============================================================================
# LITERAL SYNTAX
# ============================================================================

SIGN_CHARS: tuple[str, ...] = ("+", "-")
NEGATIVE_SIGN: str = "-"

# Leading zero that may introduce a hexadecimal prefix.
ZERO_DIGIT: str = "0"
HEX_PREFIX_MARKERS: tuple[str, ...] = ("x", "X")

# Locale-independent; grouping and alternative separators are not recognized.
DECIMAL_POINT: str = "."
EXPONENT_MARKERS: tuple[str, ...] = ("e", "E")

# ============================================================================
# DIGITS
# ============================================================================

# ASCII only. str.isdigit() accepts Unicode digits such as "٣" or "²",
# which are not digits of any radix here.
DIGIT_ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyz"
