"""Fuzz testing infrastructure for numparse.

This package contains:
- test_parsing_property: Arbitrary-input robustness and source-independence properties

Run with: pytest -m fuzz

Python 3.13+.
"""
