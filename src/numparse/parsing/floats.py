"""Floating-point engine.

Generic, parseFloat-style parsing from any CharSource:

    [ws*] [sign]? digit* "." digit* [ ("e" | "E") [sign]? digit+ ]?

The decimal point is mandatory: "123" is not a float literal here, even
though it names a valid number. At least one digit must appear on either
side of the point.

Accumulating integer and fractional parts positionally in binary floating
point drifts away from the literal (13.37 can come out as 13.369999...).
The engine tracks how many decimal places the literal carries and rounds
the result back to that precision as a final step.

Thread-safe. No module-level mutable state.

Python 3.13+.
"""

import logging

from numparse.constants import DECIMAL_POINT, EXPONENT_MARKERS
from numparse.diagnostics import ErrorTemplate, NumberOutOfRangeError
from numparse.numeric import F64, U32, FloatKind
from numparse.source import CharSource, skip_whitespace

from .digits import digit_value, fold_digits, source_position, take_sign

__all__ = ["EXPONENT_KIND", "parse_float_from_source"]

logger = logging.getLogger(__name__)

# Exponent digits accumulate into an unsigned 32-bit integer.
EXPONENT_KIND = U32

_DECIMAL_RADIX = 10


def _fold_fraction[T](source: CharSource, kind: FloatKind[T]) -> tuple[T, int, int]:
    """Consume fractional digits and return their value.

    Leading zeros are applied as divisions by ten and trailing zeros are
    never folded, so zeros alone cannot overflow the kind. Once the scale
    10**n leaves the kind's range, further digits are consumed but no longer
    folded in; they are below the kind's precision.

    Returns:
        (fractional_value, digit_count, precision). digit_count counts every
        consumed digit. precision counts decimal places up to the last
        folded non-zero digit.
    """
    ten = kind.from_digit(_DECIMAL_RADIX)
    acc = kind.zero()
    scale = kind.from_digit(1)
    leading_zeros = 0
    pending_zeros = 0
    significant = 0
    count = 0
    saturated = False

    while True:
        ch = source.peek()
        if ch is None:
            break
        digit = digit_value(ch, _DECIMAL_RADIX)
        if digit is None:
            break

        source.advance()
        count += 1
        if saturated:
            continue
        if digit == 0:
            if significant == 0:
                leading_zeros += 1
            else:
                pending_zeros += 1
            continue

        shifted: T | None = acc
        shifted_scale: T | None = scale
        for _ in range(pending_zeros + 1):
            if shifted is None or shifted_scale is None:
                break
            shifted = kind.checked_mul(shifted, ten)
            shifted_scale = kind.checked_mul(shifted_scale, ten)
        folded = None if shifted is None else kind.checked_add(shifted, kind.from_digit(digit))
        if folded is None or shifted_scale is None:
            logger.debug(
                "Fraction digits past place %d exceed %s precision, ignoring",
                leading_zeros + significant,
                kind.name,
            )
            saturated = True
            continue

        acc = folded
        scale = shifted_scale
        significant += pending_zeros + 1
        pending_zeros = 0

    value = kind.divide(acc, scale)
    zero = kind.zero()
    for _ in range(leading_zeros):
        if value == zero:
            break
        value = kind.divide(value, ten)

    return value, count, leading_zeros + significant


def _apply_exponent[T](
    source: CharSource,
    value: T,
    exponent: int,
    negative: bool,
    kind: FloatKind[T],
) -> T:
    """Scale value by 10**exponent one step at a time.

    Repeated single steps reproduce the rounding of the digit-by-digit
    definition at extreme magnitudes. The loop ends early once the value
    reaches zero, which bounds it by the kind's exponent range.
    """
    ten = kind.from_digit(_DECIMAL_RADIX)
    zero = kind.zero()

    for _ in range(exponent):
        if value == zero:
            break
        if negative:
            value = kind.divide(value, ten)
            continue
        scaled = kind.checked_mul(value, ten)
        if scaled is None:
            position = source_position(source)
            logger.debug("Overflow applying exponent %d to %s", exponent, kind.name)
            raise NumberOutOfRangeError(
                ErrorTemplate.scaled_out_of_range(kind.name, exponent, position)
            )
        value = scaled

    return value


def _correct_precision[T](value: T, precision: int, kind: FloatKind[T]) -> T:
    """Round value to precision decimal places.

    Skipped when value * 10**precision is not representable in kind; the
    accumulated value is returned as is in that case.
    """
    factor = kind.power(kind.from_digit(_DECIMAL_RADIX), precision)
    scaled = kind.checked_mul(value, factor)
    if scaled is None:
        return value
    return kind.divide(kind.round(scaled), factor)


def parse_float_from_source[T](
    source: CharSource,
    *,
    kind: FloatKind[T] = F64,  # type: ignore[assignment]
    whitespace: bool = True,
) -> T | None:
    """Parse a floating-point prefix from a character source.

    Args:
        source: Character source; left positioned after the last consumed
            character of the literal
        kind: Target float kind (default: F64)
        whitespace: Skip leading whitespace first (default: True)

    Returns:
        Parsed value, or None if there is no decimal point or no digits

    Raises:
        NumberOutOfRangeError: If the literal does not fit in kind or its
            exponent does not fit in EXPONENT_KIND

    Precision:
        precision starts as the number of fractional decimal places up to
        the last non-zero digit, so trailing zeros do not count. A negative
        exponent adds its magnitude. A non-negative exponent larger than
        precision resets it to 0: the scaled value is then a whole number.

    Examples:
        >>> parse_float_from_source(PeekableChars(" -13.37.hello "))
        -13.37
        >>> parse_float_from_source(PeekableChars("1.5e3x"))
        1500.0
        >>> parse_float_from_source(PeekableChars("123")) is None
        True
    """
    if whitespace:
        skip_whitespace(source)
    negative = take_sign(source)

    integer, integer_digits = fold_digits(source, kind, _DECIMAL_RADIX)

    # Decimal point (mandatory)
    if source.peek() != DECIMAL_POINT:
        return None
    source.advance()

    fractional_value, fraction_digits, precision = _fold_fraction(source, kind)

    # Either integer or fractional part must be given
    if integer_digits == 0 and fraction_digits == 0:
        return None

    value = kind.checked_add(integer, fractional_value)
    if value is None:
        raise NumberOutOfRangeError(
            ErrorTemplate.value_out_of_range(kind.name, _DECIMAL_RADIX, source_position(source))
        )

    # Optional exponent
    if source.peek() in EXPONENT_MARKERS:
        source.advance()
        exponent_negative = take_sign(source)
        exponent, exponent_digits = fold_digits(
            source,
            EXPONENT_KIND,
            _DECIMAL_RADIX,
            overflow=ErrorTemplate.exponent_out_of_range,
        )
        if exponent_digits > 0:
            if exponent_negative:
                precision += exponent
            elif precision < exponent:
                precision = 0
            value = _apply_exponent(source, value, exponent, exponent_negative, kind)

    value = _correct_precision(value, precision, kind)
    return kind.negate(value) if negative else value
