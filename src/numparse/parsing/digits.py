"""Digit classification and the shared fold-digits loop.

Both engines accumulate digits the same way: peek, stop at the first
character that is not a digit of the active radix, otherwise consume it and
fold it in with checked arithmetic. The non-digit is never consumed; it
stays in the source as trailing content for the caller.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable

from numparse.constants import DIGIT_ALPHABET, NEGATIVE_SIGN, SIGN_CHARS
from numparse.diagnostics import Diagnostic, ErrorTemplate, NumberOutOfRangeError
from numparse.numeric import NumericKind
from numparse.source import CharSource

__all__ = ["digit_value", "fold_digits", "source_position", "take_sign"]

logger = logging.getLogger(__name__)

# Both cases map to the same value: "A" and "a" are 10 in any radix above 10.
_DIGIT_VALUES: dict[str, int] = {
    **{ch: value for value, ch in enumerate(DIGIT_ALPHABET)},
    **{ch.upper(): value for value, ch in enumerate(DIGIT_ALPHABET)},
}

type OverflowTemplate = Callable[[str, int, int | None], Diagnostic]


def digit_value(ch: str, radix: int) -> int | None:
    """Return the value of ch as a digit of radix, or None.

    Only ASCII 0-9, a-z and A-Z are digits. Unicode digits such as "٣"
    are rejected even though str.isdigit() accepts them.

    Examples:
        >>> digit_value("7", 10)
        7
        >>> digit_value("f", 16)
        15
        >>> digit_value("F", 16)
        15
        >>> digit_value("9", 8) is None
        True
    """
    value = _DIGIT_VALUES.get(ch)
    if value is None or value >= radix:
        return None
    return value


def source_position(source: CharSource) -> int | None:
    """Characters consumed so far, if the source tracks it."""
    pos = getattr(source, "pos", None)
    return pos if isinstance(pos, int) else None


def take_sign(source: CharSource) -> bool:
    """Consume an optional leading sign.

    Returns:
        True if a minus sign was consumed, False for "+" or no sign
    """
    if source.peek() in SIGN_CHARS:
        return source.advance() == NEGATIVE_SIGN
    return False


def fold_digits[T](
    source: CharSource,
    kind: NumericKind[T],
    radix: int,
    *,
    negative: bool = False,
    overflow: OverflowTemplate = ErrorTemplate.value_out_of_range,
) -> tuple[T, int]:
    """Accumulate consecutive digits of radix into kind.

    Each digit is folded as ``acc = acc * radix + digit`` (or ``- digit``
    when negative is set, so the most negative value of a signed kind
    is reachable).

    Args:
        source: Character source positioned at the first candidate digit
        kind: Target numeric kind supplying checked arithmetic
        radix: Digit base (2..36)
        negative: Fold toward negative values
        overflow: Diagnostic factory used when checked arithmetic fails

    Returns:
        (accumulator, digit_count). digit_count == 0 means nothing matched
        and the accumulator is kind.zero().

    Raises:
        NumberOutOfRangeError: If a folded digit leaves the kind's range
    """
    base = kind.from_digit(radix)
    combine = kind.checked_sub if negative else kind.checked_add
    acc = kind.zero()
    count = 0

    while True:
        ch = source.peek()
        if ch is None:
            break
        digit = digit_value(ch, radix)
        if digit is None:
            break

        source.advance()
        shifted = kind.checked_mul(acc, base)
        folded = None if shifted is None else combine(shifted, kind.from_digit(digit))
        if folded is None:
            position = source_position(source)
            logger.debug(
                "Overflow folding digit %r into %s (radix %d) at position %s",
                ch,
                kind.name,
                radix,
                position,
            )
            raise NumberOutOfRangeError(overflow(kind.name, radix, position))

        acc = folded
        count += 1

    return acc, count
