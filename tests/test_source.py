"""Tests for lookahead character sources.

Validates PeekableChars buffering, position tracking and EOF handling,
and whitespace skipping over any CharSource.
"""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from numparse.source import CharSource, PeekableChars, skip_whitespace

# ============================================================================
# PEEK AND ADVANCE
# ============================================================================


class TestPeekableCharsBasic:
    """Test basic peek/advance behavior."""

    def test_peek_does_not_advance(self) -> None:
        """Repeated peeks return the same character."""
        source = PeekableChars("abc")

        assert source.peek() == "a"
        assert source.peek() == "a"
        assert source.pos == 0

    def test_advance_consumes_in_order(self) -> None:
        """advance() returns characters left to right."""
        source = PeekableChars("abc")

        assert source.advance() == "a"
        assert source.advance() == "b"
        assert source.peek() == "c"
        assert source.pos == 2

    def test_peek_at_end_returns_none(self) -> None:
        """peek() signals end of input with None."""
        source = PeekableChars("a")
        source.advance()

        assert source.peek() is None
        assert source.is_eof

    def test_empty_source_is_eof(self) -> None:
        """Empty input is immediately at EOF."""
        source = PeekableChars("")

        assert source.is_eof
        assert source.pos == 0

    def test_advance_past_end_raises_eof_error(self) -> None:
        """advance() at EOF raises EOFError with the position."""
        source = PeekableChars("hi")
        source.advance()
        source.advance()

        with pytest.raises(EOFError, match="Unexpected EOF at position 2"):
            source.advance()

    def test_is_eof_does_not_consume(self) -> None:
        """Checking is_eof buffers but does not consume."""
        source = PeekableChars("x")

        assert not source.is_eof
        assert source.pos == 0
        assert source.advance() == "x"


# ============================================================================
# BACKING STORAGE
# ============================================================================


class TestPeekableCharsBacking:
    """PeekableChars works over any iterable of characters."""

    def test_generator_source(self) -> None:
        """Generators are consumed lazily."""
        consumed: list[str] = []

        def chars() -> Iterator[str]:
            for ch in "12":
                consumed.append(ch)
                yield ch

        source = PeekableChars(chars())

        assert consumed == []
        assert source.peek() == "1"
        assert consumed == ["1"]

    def test_list_of_chars(self) -> None:
        """Lists of characters are accepted."""
        source = PeekableChars(["4", "2"])

        assert source.advance() == "4"
        assert source.advance() == "2"
        assert source.is_eof

    def test_text_stream(self) -> None:
        """A text stream read one character at a time is accepted."""
        stream = io.StringIO("7x")
        source = PeekableChars(iter(lambda: stream.read(1), ""))

        assert source.advance() == "7"
        assert source.peek() == "x"

    def test_satisfies_char_source_protocol(self) -> None:
        """PeekableChars is a CharSource."""
        assert isinstance(PeekableChars("a"), CharSource)


# ============================================================================
# ITERATION
# ============================================================================


class TestPeekableCharsIteration:
    """Iterating yields the remaining characters."""

    def test_iterates_remaining(self) -> None:
        """Iteration resumes after consumed characters."""
        source = PeekableChars("42abc")
        source.advance()
        source.advance()

        assert "".join(source) == "abc"
        assert source.pos == 5

    def test_iterates_buffered_character(self) -> None:
        """A peeked character is not lost when iterating."""
        source = PeekableChars("ab")
        source.peek()

        assert list(source) == ["a", "b"]


# ============================================================================
# WHITESPACE
# ============================================================================


class TestSkipWhitespace:
    """Test skip_whitespace()."""

    def test_skips_ascii_whitespace(self) -> None:
        """Space, tab, newline and carriage return are skipped."""
        source = PeekableChars(" \t\n\r7")

        assert skip_whitespace(source) == 4
        assert source.peek() == "7"

    def test_skips_unicode_whitespace(self) -> None:
        """No-break space and em space are whitespace too."""
        source = PeekableChars("\u00a0\u20037")

        assert skip_whitespace(source) == 2
        assert source.peek() == "7"

    def test_no_whitespace(self) -> None:
        """Nothing is consumed when the first character is not whitespace."""
        source = PeekableChars("7 ")

        assert skip_whitespace(source) == 0
        assert source.pos == 0

    def test_all_whitespace(self) -> None:
        """Whitespace-only input is consumed to EOF."""
        source = PeekableChars("   ")

        assert skip_whitespace(source) == 3
        assert source.is_eof
