"""numparse exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete error also derives from the matching builtin exception, so
callers can catch OverflowError, ValueError or TypeError without importing
numparse.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidRadixError",
    "NumParseError",
    "NumberKindError",
    "NumberOutOfRangeError",
]


class NumParseError(Exception):
    """Base exception for all numparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumParseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NumberOutOfRangeError(NumParseError, OverflowError):
    """Checked arithmetic overflowed the target numeric kind.

    Raised instead of returning a wrapped or truncated value. The
    recoverable "nothing parsed" outcome is never reported this way;
    it is a None return value.

    Attributes:
        type_name: Name of the kind that overflowed (e.g. "i32")
        position: Characters consumed when the overflow was detected,
            or None when the source does not track positions
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize NumberOutOfRangeError.

        Args:
            diagnostic: Range diagnostic from ErrorTemplate
        """
        super().__init__(diagnostic)
        self.type_name = diagnostic.type_name or ""
        self.position = diagnostic.position


class InvalidRadixError(NumParseError, ValueError):
    """Explicit radix outside the supported 2..36 range.

    Attributes:
        radix: The rejected radix
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize InvalidRadixError.

        Args:
            diagnostic: RADIX_OUT_OF_RANGE diagnostic
        """
        super().__init__(diagnostic)
        self.radix = diagnostic.radix


class NumberKindError(NumParseError, TypeError):
    """Numeric kind cannot be used for the requested parse.

    Example:
        parse_int("-5", kind=U32)  # unsigned kind for a signed parse
    """
