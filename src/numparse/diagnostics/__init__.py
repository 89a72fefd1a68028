"""Diagnostic system for numparse errors.

Provides structured error diagnostics with codes, positions and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidRadixError,
    NumberKindError,
    NumberOutOfRangeError,
    NumParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidRadixError",
    "NumParseError",
    "NumberKindError",
    "NumberOutOfRangeError",
    "OutputFormat",
]
