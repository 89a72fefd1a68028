"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from numparse.constants import MAX_RADIX, MIN_RADIX

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # RANGE ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def value_out_of_range(type_name: str, radix: int, position: int | None) -> Diagnostic:
        """Digit accumulation overflowed the target kind.

        Args:
            type_name: Name of the target numeric kind
            radix: Radix in effect while folding digits
            position: Characters consumed when the overflow was detected

        Returns:
            Diagnostic for VALUE_OUT_OF_RANGE
        """
        msg = f"Value does not fit in {type_name}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_OUT_OF_RANGE,
            message=msg,
            position=position,
            hint="Parse with a wider numeric kind or shorten the literal",
            type_name=type_name,
            radix=radix,
        )

    @staticmethod
    def exponent_out_of_range(type_name: str, radix: int, position: int | None) -> Diagnostic:
        """Exponent digits overflowed the exponent accumulator.

        Args:
            type_name: Name of the exponent accumulator kind
            radix: Radix of the exponent digits (always 10)
            position: Characters consumed when the overflow was detected

        Returns:
            Diagnostic for EXPONENT_OUT_OF_RANGE
        """
        msg = f"Exponent does not fit in {type_name}"
        return Diagnostic(
            code=DiagnosticCode.EXPONENT_OUT_OF_RANGE,
            message=msg,
            position=position,
            hint="Exponents are limited to the range of an unsigned 32-bit integer",
            type_name=type_name,
            radix=radix,
        )

    @staticmethod
    def scaled_out_of_range(type_name: str, exponent: int, position: int | None) -> Diagnostic:
        """Applying a positive exponent overflowed the target kind.

        Args:
            type_name: Name of the target numeric kind
            exponent: Exponent magnitude that was being applied
            position: Characters consumed when the overflow was detected

        Returns:
            Diagnostic for SCALED_OUT_OF_RANGE
        """
        msg = f"Value scaled by 10^{exponent} does not fit in {type_name}"
        return Diagnostic(
            code=DiagnosticCode.SCALED_OUT_OF_RANGE,
            message=msg,
            position=position,
            hint="Infinity is not produced; use a wider float kind or a smaller exponent",
            type_name=type_name,
        )

    # =========================================================================
    # USAGE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def radix_out_of_range(radix: int) -> Diagnostic:
        """Explicit radix outside the supported range.

        Args:
            radix: The rejected radix

        Returns:
            Diagnostic for RADIX_OUT_OF_RANGE
        """
        msg = f"Radix {radix} is outside the supported range {MIN_RADIX}..{MAX_RADIX}"
        return Diagnostic(
            code=DiagnosticCode.RADIX_OUT_OF_RANGE,
            message=msg,
            hint=(
                f"Pass a radix between {MIN_RADIX} and {MAX_RADIX}, "
                "or None to infer it from the literal"
            ),
            radix=radix,
        )

    @staticmethod
    def signed_kind_required(type_name: str) -> Diagnostic:
        """Signed parse requested with an unsigned kind.

        Args:
            type_name: Name of the unsigned kind that was passed

        Returns:
            Diagnostic for SIGNED_KIND_REQUIRED
        """
        msg = f"Signed parsing requires a signed numeric kind, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.SIGNED_KIND_REQUIRED,
            message=msg,
            hint="Use parse_uint for unsigned kinds",
            type_name=type_name,
        )

    # =========================================================================
    # SOURCE ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Advance past the end of a character source.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            position=position,
            hint="Check peek() for None before calling advance()",
        )
