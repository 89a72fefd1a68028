"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Range errors (checked arithmetic overflowed)
        2000-2999: Usage errors (invalid arguments from the caller)
        3000-3999: Source errors (character source misuse)
    """

    # Range errors (1000-1999)
    VALUE_OUT_OF_RANGE = 1001
    EXPONENT_OUT_OF_RANGE = 1002
    SCALED_OUT_OF_RANGE = 1003

    # Usage errors (2000-2999)
    RADIX_OUT_OF_RANGE = 2001
    SIGNED_KIND_REQUIRED = 2002

    # Source errors (3000-3999)
    UNEXPECTED_EOF = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Characters consumed from the source when the error was
            detected (None when the source does not track positions)
        hint: Suggestion for fixing the error
        type_name: Name of the target numeric kind involved (e.g. "i32")
        radix: Radix active when the error was detected
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None
    type_name: str | None = None
    radix: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[VALUE_OUT_OF_RANGE]: Value does not fit in i8
              --> position 3
              = type: i8
              = radix: 10
              = help: Parse with a wider numeric kind or shorten the literal

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
