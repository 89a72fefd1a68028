"""numparse - Permissive numeric-prefix parsing with caller-chosen numeric types.

Extracts the longest valid numeric prefix from any character source and
converts it to the numeric kind the caller selects, following the
non-throwing semantics of the classic parseInt / parseFloat family:
leading whitespace skipped, optional sign, 0x radix detection, trailing
content ignored, None when no digits match.

Public API:
    parse_uint, parse_uint_with_radix - Unsigned integer prefixes
    parse_int, parse_int_with_radix - Signed integer prefixes
    parse_float - Floating-point prefixes (decimal point mandatory)
    parse_*_from_source - The same engines over any CharSource
    PeekableChars - Adapt any iterable of characters into a CharSource
    I8..I128, U8..U128, F32, F64 - Built-in numeric kinds

Exceptions:
    NumParseError - Base exception class
    NumberOutOfRangeError - Value does not fit the kind (also an OverflowError)
    InvalidRadixError - Explicit radix outside 2..36 (also a ValueError)
    NumberKindError - Kind unusable for the requested parse (also a TypeError)

Submodules:
    numparse.source - Lookahead character sources
    numparse.numeric - Numeric kind protocols and built-in kinds
    numparse.parsing - Integer and floating-point engines
    numparse.diagnostics - Diagnostic codes, templates and formatting
    numparse.constants - Grammar constants
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    InvalidRadixError,
    NumberKindError,
    NumberOutOfRangeError,
    NumParseError,
)
from .numeric import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    FloatKind,
    FloatType,
    IntegerKind,
    IntegerType,
)
from .parsing import (
    parse_float,
    parse_float_from_source,
    parse_int,
    parse_int_from_source,
    parse_int_with_radix,
    parse_uint,
    parse_uint_from_source,
    parse_uint_with_radix,
)
from .source import CharSource, PeekableChars, skip_whitespace

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("numparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "CharSource",
    "FloatKind",
    "FloatType",
    "IntegerKind",
    "IntegerType",
    "InvalidRadixError",
    "NumParseError",
    "NumberKindError",
    "NumberOutOfRangeError",
    "PeekableChars",
    "__version__",
    "parse_float",
    "parse_float_from_source",
    "parse_int",
    "parse_int_from_source",
    "parse_int_with_radix",
    "parse_uint",
    "parse_uint_from_source",
    "parse_uint_with_radix",
    "skip_whitespace",
]
