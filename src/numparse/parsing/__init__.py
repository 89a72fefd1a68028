"""Numeric-prefix parsing: parseInt / parseFloat semantics for Python.

- Functions NEVER raise for malformed input - None means nothing parsed
- Parsed zero (0, 0.0) and nothing parsed (None) are always distinct
- Trailing content after the numeric prefix is ignored
- Checked arithmetic: values outside the target kind raise NumberOutOfRangeError

Public API:
    String Functions:
        parse_uint - Unsigned integer, radix 10 or 0x-prefixed hex
        parse_uint_with_radix - Unsigned integer in an explicit radix
        parse_int - Signed integer, radix 10 or 0x-prefixed hex
        parse_int_with_radix - Signed integer in an explicit radix
        parse_float - Floating-point literal with mandatory decimal point

    Source Functions (any CharSource, optional whitespace skipping):
        parse_uint_from_source
        parse_int_from_source
        parse_float_from_source

Example:
    >>> from numparse.parsing import parse_float, parse_int
    >>> from numparse.numeric import I8
    >>> parse_int("-128 apples", kind=I8)
    -128
    >>> parse_float("0.1 + 0.2") == 0.1
    True

Python 3.13+.
"""

from .floats import parse_float_from_source
from .integers import parse_int_from_source, parse_uint_from_source
from .strings import (
    parse_float,
    parse_int,
    parse_int_with_radix,
    parse_uint,
    parse_uint_with_radix,
)

__all__ = [
    # Source functions
    "parse_float_from_source",
    "parse_int_from_source",
    "parse_uint_from_source",
    # String functions
    "parse_float",
    "parse_int",
    "parse_int_with_radix",
    "parse_uint",
    "parse_uint_with_radix",
]
