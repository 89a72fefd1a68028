"""Hypothesis strategies for numparse property-based testing.

Strategies are organized by domain:

- numbers: Integer and decimal literals, numeric kinds, prefixes/suffixes

Usage:
    from tests.strategies import decimal_literals, integer_literals

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - integer_literals, decimal_literals
"""

from .numbers import (
    SIGNED_KINDS,
    UNSIGNED_KINDS,
    decimal_literals,
    integer_literals,
    radixes,
    signed_kinds,
    to_radix,
    trailing_garbage,
    unsigned_kinds,
    whitespace_prefixes,
)

__all__ = [
    "SIGNED_KINDS",
    "UNSIGNED_KINDS",
    "decimal_literals",
    "integer_literals",
    "radixes",
    "signed_kinds",
    "to_radix",
    "trailing_garbage",
    "unsigned_kinds",
    "whitespace_prefixes",
]
