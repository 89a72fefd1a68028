"""String-entry convenience layer.

Wraps the engines for the common case: parse the numeric prefix of a
complete in-memory string, skipping leading whitespace.

    >>> parse_int("  -789hello")
    -789
    >>> parse_uint_with_radix("CAFEBABE", 16)
    3405691582
    >>> parse_float(" -13.37e-2.hello ")
    -0.1337

Use the *_from_source functions with a PeekableChars when the position
where the prefix ended matters, or to disable whitespace skipping.

Python 3.13+.
"""

from numparse.numeric import F64, I64, U64, FloatKind, IntegerKind
from numparse.source import PeekableChars

from .floats import parse_float_from_source
from .integers import parse_int_from_source, parse_uint_from_source

__all__ = [
    "parse_float",
    "parse_int",
    "parse_int_with_radix",
    "parse_uint",
    "parse_uint_with_radix",
]


def parse_uint[T](text: str, *, kind: IntegerKind[T] = U64) -> T | None:  # type: ignore[assignment]
    """Parse an unsigned integer prefix of text (radix 10, or 16 after 0x)."""
    return parse_uint_from_source(PeekableChars(text), kind=kind)


def parse_uint_with_radix[T](
    text: str,
    radix: int,
    *,
    kind: IntegerKind[T] = U64,  # type: ignore[assignment]
) -> T | None:
    """Parse an unsigned integer prefix of text in an explicit radix (2..36)."""
    return parse_uint_from_source(PeekableChars(text), radix, kind=kind)


def parse_int[T](text: str, *, kind: IntegerKind[T] = I64) -> T | None:  # type: ignore[assignment]
    """Parse a signed integer prefix of text (radix 10, or 16 after 0x)."""
    return parse_int_from_source(PeekableChars(text), kind=kind)


def parse_int_with_radix[T](
    text: str,
    radix: int,
    *,
    kind: IntegerKind[T] = I64,  # type: ignore[assignment]
) -> T | None:
    """Parse a signed integer prefix of text in an explicit radix (2..36)."""
    return parse_int_from_source(PeekableChars(text), radix, kind=kind)


def parse_float[T](text: str, *, kind: FloatKind[T] = F64) -> T | None:  # type: ignore[assignment]
    """Parse a floating-point prefix of text. The decimal point is mandatory."""
    return parse_float_from_source(PeekableChars(text), kind=kind)
