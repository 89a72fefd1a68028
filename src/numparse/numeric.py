"""Target numeric kinds for the parsing engines.

A kind describes the caller-selected result type and supplies the checked
arithmetic the engines fold digits with. The engines only ever talk to a
kind through the NumericKind / IntegerKind / FloatKind protocols, so custom
kinds (for example one built on fractions.Fraction) plug in unchanged.

Checked operations return None on overflow instead of raising. The engines
turn None into NumberOutOfRangeError with position context.

Built-in kinds:
    I8, I16, I32, I64, I128 - two's-complement signed integers (Python int)
    U8, U16, U32, U64, U128 - unsigned integers (Python int)
    F32 - IEEE 754 binary32, every result rounded to single precision
    F64 - IEEE 754 binary64 (Python float)

Python 3.13+. Zero external dependencies.
"""

import math
import struct
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

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
    "FloatKind",
    "FloatType",
    "IntegerKind",
    "IntegerType",
    "NumericKind",
]

_FLOAT_WIDTHS: tuple[int, ...] = (32, 64)

# Every binary64 value at or above 2**52 in magnitude has no fractional part.
_INTEGRAL_THRESHOLD: float = 2.0**52


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class NumericKind[T](Protocol):
    """Operations shared by every kind: enough to fold digits."""

    @property
    def name(self) -> str:
        """Short type name used in diagnostics (e.g. "i32")."""
        ...

    def zero(self) -> T:
        """Additive identity."""
        ...

    def from_digit(self, value: int) -> T:
        """Construct a value from a small unsigned constant (digit or radix)."""
        ...

    def checked_mul(self, a: T, b: T) -> T | None:
        """Multiply, or None if the product is out of range."""
        ...

    def checked_add(self, a: T, b: T) -> T | None:
        """Add, or None if the sum is out of range."""
        ...

    def checked_sub(self, a: T, b: T) -> T | None:
        """Subtract, or None if the difference is out of range."""
        ...


class IntegerKind[T](NumericKind[T], Protocol):
    """Integer-like kind."""

    @property
    def signed(self) -> bool:
        """True if the kind can hold negative values."""
        ...


class FloatKind[T](NumericKind[T], Protocol):
    """Float-like kind: adds division, powers, rounding and negation."""

    def negate(self, a: T) -> T:
        """Arithmetic negation."""
        ...

    def divide(self, a: T, b: T) -> T:
        """Divide a by a non-zero b."""
        ...

    def power(self, base: T, exponent: int) -> T:
        """Raise a non-negative base to a non-negative integer power.

        Results beyond the finite range are reported as positive infinity
        (or the kind's equivalent), never as an exception.
        """
        ...

    def round(self, a: T) -> T:
        """Round to the nearest integer, ties away from zero."""
        ...


@dataclass(frozen=True, slots=True)
class IntegerType:
    """Fixed-width integer kind backed by Python int.

    Python ints never overflow on their own, so every checked operation
    compares the exact result against the width's bounds.

    Attributes:
        name: Short type name (e.g. "i32", "u8")
        bits: Width in bits
        signed: Two's-complement signed when True, unsigned otherwise

    Example:
        >>> I8.checked_add(127, 0)
        127
        >>> I8.checked_add(127, 1) is None
        True
        >>> U8.max_value
        255
    """

    name: str
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        """Validate the width.

        Raises:
            ValueError: If bits is not positive
        """
        if self.bits < 1:
            msg = f"IntegerType.bits must be >= 1, got {self.bits}"
            raise ValueError(msg)

    @property
    def min_value(self) -> int:
        """Smallest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Check if value lies within this kind's range."""
        return self.min_value <= value <= self.max_value

    def _checked(self, value: int) -> int | None:
        return value if self.contains(value) else None

    def zero(self) -> int:
        return 0

    def from_digit(self, value: int) -> int:
        """Construct a value from a digit or radix.

        Raises:
            ValueError: If value does not fit (never the case for radix <= 36)
        """
        if not self.contains(value):
            msg = f"Constant {value} does not fit in {self.name}"
            raise ValueError(msg)
        return value

    def checked_mul(self, a: int, b: int) -> int | None:
        return self._checked(a * b)

    def checked_add(self, a: int, b: int) -> int | None:
        return self._checked(a + b)

    def checked_sub(self, a: int, b: int) -> int | None:
        return self._checked(a - b)


@dataclass(frozen=True, slots=True)
class FloatType:
    """IEEE 754 binary floating-point kind backed by Python float.

    Python floats are binary64. The 32-bit kind narrows every intermediate
    result to binary32 through struct packing, so accumulation drifts the
    way single-precision arithmetic does.

    Checked operations treat a non-finite result as overflow.

    Attributes:
        name: Short type name ("f32" or "f64")
        bits: 32 or 64

    Example:
        >>> F64.checked_mul(1e308, 10.0) is None
        True
        >>> F64.round(2.5)
        3.0
        >>> F64.round(-2.5)
        -3.0
    """

    name: str
    bits: int

    def __post_init__(self) -> None:
        """Validate the width.

        Raises:
            ValueError: If bits is not 32 or 64
        """
        if self.bits not in _FLOAT_WIDTHS:
            msg = f"FloatType.bits must be 32 or 64, got {self.bits}"
            raise ValueError(msg)

    def _narrow(self, value: float) -> float:
        """Round a binary64 result to this kind's precision."""
        if self.bits == 64:
            return value
        try:
            return float(struct.unpack("<f", struct.pack("<f", value))[0])
        except OverflowError:
            # Beyond binary32 range: IEEE narrowing rounds to infinity
            return math.copysign(math.inf, value)

    def _checked(self, value: float) -> float | None:
        narrowed = self._narrow(value)
        return narrowed if math.isfinite(narrowed) else None

    def zero(self) -> float:
        return 0.0

    def from_digit(self, value: int) -> float:
        return self._narrow(float(value))

    def checked_mul(self, a: float, b: float) -> float | None:
        return self._checked(a * b)

    def checked_add(self, a: float, b: float) -> float | None:
        return self._checked(a + b)

    def checked_sub(self, a: float, b: float) -> float | None:
        return self._checked(a - b)

    def negate(self, a: float) -> float:
        return -a

    def divide(self, a: float, b: float) -> float:
        return self._narrow(a / b)

    def power(self, base: float, exponent: int) -> float:
        try:
            return self._narrow(base**exponent)
        except OverflowError:
            return math.inf

    def round(self, a: float) -> float:
        """Round to the nearest integer, ties away from zero.

        Goes through Decimal so the tie test is exact: a + 0.5 in binary
        floating point can itself round up (0.49999999999999994 + 0.5 == 1.0).
        """
        # Non-finite values and magnitudes >= 2**52 are already integral
        if not math.isfinite(a) or abs(a) >= _INTEGRAL_THRESHOLD:
            return a
        rounded = Decimal(a).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return self._narrow(float(rounded))


# ============================================================================
# BUILT-IN KINDS
# ============================================================================

I8 = IntegerType("i8", 8, signed=True)
I16 = IntegerType("i16", 16, signed=True)
I32 = IntegerType("i32", 32, signed=True)
I64 = IntegerType("i64", 64, signed=True)
I128 = IntegerType("i128", 128, signed=True)

U8 = IntegerType("u8", 8, signed=False)
U16 = IntegerType("u16", 16, signed=False)
U32 = IntegerType("u32", 32, signed=False)
U64 = IntegerType("u64", 64, signed=False)
U128 = IntegerType("u128", 128, signed=False)

F32 = FloatType("f32", 32)
F64 = FloatType("f64", 64)
