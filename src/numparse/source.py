"""Lookahead character sources for prefix parsing.

The engines are written against the CharSource protocol only: peek at the
next character without consuming it, or advance past it. Any ordered
character-producing iterable can be adapted with PeekableChars.

Design Philosophy:
    - Single forward pass, no backtracking
    - One character of lookahead, O(1) buffering
    - EOF is a peek() result (None), advancing past it is an error
    - Nothing is assumed about the backing storage (str, generator, stream)

Usage:
    >>> source = PeekableChars("42abc")
    >>> parse_int_from_source(source)
    42
    >>> source.pos  # Characters consumed by the numeric prefix
    2
    >>> source.peek()  # Trailing content stays available
    'a'

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from numparse.diagnostics import ErrorTemplate

__all__ = ["CharSource", "PeekableChars", "skip_whitespace"]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class CharSource(Protocol):
    """Capability contract for a lookahead character source."""

    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at EOF."""
        ...

    def advance(self) -> str:
        """Consume and return the next character."""
        ...


class PeekableChars:
    """Adapt any iterable of characters into a CharSource.

    Buffers at most one character, so arbitrary generators and streams can
    be parsed without materializing them.

    Example:
        >>> source = PeekableChars(iter("hi"))
        >>> source.peek()
        'h'
        >>> source.peek()  # Peeking never advances
        'h'
        >>> source.advance()
        'h'
        >>> source.pos
        1
        >>> source.advance()
        'i'
        >>> source.peek() is None
        True
        >>> source.advance()
        Traceback (most recent call last):
        ...
        EOFError: Unexpected EOF at position 2

    Thread Safety:
        Not thread-safe. Each parse call should own its source.
    """

    __slots__ = ("_buffer", "_chars", "_pos")

    def __init__(self, chars: Iterable[str]) -> None:
        """Wrap an iterable of single characters.

        Args:
            chars: Any iterable producing characters (a str iterates by character)
        """
        self._chars: Iterator[str] = iter(chars)
        self._buffer: str | None = None
        self._pos = 0

    @property
    def pos(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    @property
    def is_eof(self) -> bool:
        """Check if the source is exhausted."""
        return self.peek() is None

    def peek(self) -> str | None:
        """Return the next character without advancing.

        Returns:
            Next character, or None when the source is exhausted
        """
        if self._buffer is None:
            self._buffer = next(self._chars, None)
        return self._buffer

    def advance(self) -> str:
        """Consume and return the next character.

        Returns:
            The consumed character

        Raises:
            EOFError: If the source is exhausted
        """
        ch = self.peek()
        if ch is None:
            diagnostic = ErrorTemplate.unexpected_eof(self._pos)
            raise EOFError(diagnostic.message)
        self._buffer = None
        self._pos += 1
        return ch

    def __iter__(self) -> "PeekableChars":
        return self

    def __next__(self) -> str:
        if self.peek() is None:
            raise StopIteration
        return self.advance()


def skip_whitespace(source: CharSource) -> int:
    """Consume characters while they are whitespace.

    Uses str.isspace(), so Unicode whitespace such as U+00A0 and U+2003
    is skipped along with ASCII space, tab and line breaks.

    Args:
        source: Character source to advance

    Returns:
        Number of characters skipped

    Example:
        >>> source = PeekableChars(" \\t\\n 7")
        >>> skip_whitespace(source)
        4
        >>> source.peek()
        '7'
    """
    skipped = 0
    while True:
        ch = source.peek()
        if ch is None or not ch.isspace():
            return skipped
        source.advance()
        skipped += 1
