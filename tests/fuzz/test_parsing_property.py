"""Fuzz properties for the parsing engines over arbitrary input.

Properties tested:
- Arbitrary text never raises anything but NumberOutOfRangeError
- The source position never passes the end of the input
- Results do not depend on how the characters are supplied
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from numparse import (
    F32,
    F64,
    I8,
    I64,
    U8,
    U64,
    NumberOutOfRangeError,
    PeekableChars,
    parse_float_from_source,
    parse_int_from_source,
    parse_uint_from_source,
)

pytestmark = pytest.mark.fuzz

# Biased toward characters that matter to the grammar
_NUMERIC_ALPHABET = st.sampled_from(list("0123456789+-.eExXabcdefABCDEF \t"))

numeric_text = st.one_of(
    st.text(),
    st.text(alphabet=_NUMERIC_ALPHABET, max_size=40),
)

_ENGINES = {
    "uint_u8": lambda source: parse_uint_from_source(source, kind=U8),
    "uint_u64": lambda source: parse_uint_from_source(source, kind=U64),
    "int_i8": lambda source: parse_int_from_source(source, kind=I8),
    "int_i64": lambda source: parse_int_from_source(source, kind=I64),
    "float_f32": lambda source: parse_float_from_source(source, kind=F32),
    "float_f64": lambda source: parse_float_from_source(source, kind=F64),
}


def _run(engine: str, source: PeekableChars) -> tuple[str, object]:
    try:
        return "value", _ENGINES[engine](source)
    except NumberOutOfRangeError as error:
        assert error.diagnostic is not None
        return "overflow", error.diagnostic.code


class TestArbitraryInput:
    """Engines are total over arbitrary text."""

    @given(text=numeric_text, engine=st.sampled_from(sorted(_ENGINES)))
    @settings(max_examples=1000)
    def test_only_range_errors(self, text: str, engine: str) -> None:
        """Only NumberOutOfRangeError escapes, and the position stays in bounds."""
        source = PeekableChars(text)
        outcome, _ = _run(engine, source)
        event(f"engine={engine}")
        event(f"outcome={outcome}")

        assert source.pos <= len(text)

    @given(text=numeric_text, engine=st.sampled_from(sorted(_ENGINES)))
    @settings(max_examples=500)
    def test_source_independent(self, text: str, engine: str) -> None:
        """A string and a list iterator over the same text parse identically."""
        from_string = PeekableChars(text)
        from_list = PeekableChars(iter(list(text)))

        assert _run(engine, from_string) == _run(engine, from_list)
        assert from_string.pos == from_list.pos
        assert "".join(from_string) == "".join(from_list)

    @given(text=numeric_text, suffix=st.text(max_size=10))
    @settings(max_examples=500)
    def test_float_remainder_consistent(self, text: str, suffix: str) -> None:
        """Characters after the consumed prefix are exactly the rest of the input."""
        full = text + suffix
        source = PeekableChars(full)
        try:
            parse_float_from_source(source)
        except NumberOutOfRangeError:
            return

        consumed = source.pos
        assert "".join(source) == full[consumed:]
