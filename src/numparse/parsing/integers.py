"""Integer and unsigned-integer engine.

Generic, parseInt-style parsing of integers from any CharSource:

    [ws*] [sign]? ( "0x" hexdigit* | digit* )

- Leading whitespace is skipped when enabled
- The sign is recognized by the signed variant only
- Without an explicit radix, a leading 0x / 0X selects radix 16
- Parsing stops at the first non-digit, which is left unconsumed
- No digits means no value (None), never zero

Overflow of the target kind raises NumberOutOfRangeError.

Thread-safe. No module-level mutable state.

Python 3.13+.
"""

import logging

from numparse.constants import (
    DEFAULT_RADIX,
    HEX_PREFIX_MARKERS,
    HEX_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    ZERO_DIGIT,
)
from numparse.diagnostics import ErrorTemplate, InvalidRadixError, NumberKindError
from numparse.numeric import I64, U64, IntegerKind
from numparse.source import CharSource, skip_whitespace

from .digits import fold_digits, take_sign

__all__ = ["parse_int_from_source", "parse_uint_from_source", "validate_radix"]

logger = logging.getLogger(__name__)


def validate_radix(radix: int) -> int:
    """Check an explicit radix against the supported 2..36 range.

    Args:
        radix: Caller-supplied radix

    Returns:
        The radix, unchanged

    Raises:
        InvalidRadixError: If radix is outside 2..36
    """
    if not MIN_RADIX <= radix <= MAX_RADIX:
        logger.debug("Rejected radix %d", radix)
        raise InvalidRadixError(ErrorTemplate.radix_out_of_range(radix))
    return radix


def _parse_digits[T](
    source: CharSource,
    radix: int | None,
    kind: IntegerKind[T],
    negative: bool,
) -> T | None:
    """Radix inference plus digit folding, shared by both variants."""
    seen_zero = False

    if radix is None:
        radix = DEFAULT_RADIX
        if source.peek() == ZERO_DIGIT:
            source.advance()
            seen_zero = True
            if source.peek() in HEX_PREFIX_MARKERS:
                source.advance()
                radix = HEX_RADIX
                # "0x" alone is a prefix, not a zero
                seen_zero = False
    else:
        validate_radix(radix)

    value, count = fold_digits(source, kind, radix, negative=negative)
    if count == 0 and not seen_zero:
        return None
    return value


def parse_uint_from_source[T](
    source: CharSource,
    radix: int | None = None,
    *,
    kind: IntegerKind[T] = U64,  # type: ignore[assignment]
    whitespace: bool = True,
) -> T | None:
    """Parse an unsigned integer prefix from a character source.

    A leading sign is not part of the unsigned grammar: "+5" and "-5"
    both yield None with the sign left unconsumed.

    Args:
        source: Character source; left positioned after the last digit
        radix: Explicit radix (2..36), or None to infer 10 or 16 from a 0x prefix
        kind: Target integer kind (default: U64)
        whitespace: Skip leading whitespace first (default: True)

    Returns:
        Parsed value, or None if no digits matched

    Raises:
        InvalidRadixError: If radix is outside 2..36
        NumberOutOfRangeError: If the value does not fit in kind

    Examples:
        >>> parse_uint_from_source(PeekableChars("0x1F rest"))
        31
        >>> parse_uint_from_source(PeekableChars("0x")) is None
        True
        >>> parse_uint_from_source(PeekableChars("777"), 8)
        511
    """
    if whitespace:
        skip_whitespace(source)
    return _parse_digits(source, radix, kind, negative=False)


def parse_int_from_source[T](
    source: CharSource,
    radix: int | None = None,
    *,
    kind: IntegerKind[T] = I64,  # type: ignore[assignment]
    whitespace: bool = True,
) -> T | None:
    """Parse a signed integer prefix from a character source.

    An optional "+" or "-" precedes the digits; radix inference happens
    after the sign, so "-0x10" is -16.

    Args:
        source: Character source; left positioned after the last digit
        radix: Explicit radix (2..36), or None to infer 10 or 16 from a 0x prefix
        kind: Target signed integer kind (default: I64)
        whitespace: Skip leading whitespace first (default: True)

    Returns:
        Parsed value, or None if no digits matched

    Raises:
        NumberKindError: If kind is unsigned
        InvalidRadixError: If radix is outside 2..36
        NumberOutOfRangeError: If the value does not fit in kind

    Examples:
        >>> parse_int_from_source(PeekableChars("  -789hello"))
        -789
        >>> parse_int_from_source(PeekableChars("-")) is None
        True
    """
    if not kind.signed:
        raise NumberKindError(ErrorTemplate.signed_kind_required(kind.name))
    if whitespace:
        skip_whitespace(source)
    negative = take_sign(source)
    return _parse_digits(source, radix, kind, negative=negative)
