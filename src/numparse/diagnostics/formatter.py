"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.radix_out_of_range(40)
        >>> print(formatter.format(diagnostic))
        error[RADIX_OUT_OF_RANGE]: Radix 40 is outside the supported range 2..36
          = radix: 40
          = help: Pass a radix between 2 and 36, or None to infer it from the literal

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        RADIX_OUT_OF_RANGE: Radix 40 is outside the supported range 2..36
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[VALUE_OUT_OF_RANGE]: Value does not fit in u8
              --> position 3
              = type: u8
              = radix: 10
              = help: Parse with a wider numeric kind or shorten the literal
        """
        parts = [f"error[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.position is not None:
            parts.append(f"  --> position {diagnostic.position}")

        if diagnostic.type_name:
            parts.append(f"  = type: {diagnostic.type_name}")

        if diagnostic.radix is not None:
            parts.append(f"  = radix: {diagnostic.radix}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            VALUE_OUT_OF_RANGE: Value does not fit in u8
        """
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "VALUE_OUT_OF_RANGE", "code_value": 1001, "message": "..."}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
        }

        # Add optional fields if present
        if diagnostic.position is not None:
            data["position"] = diagnostic.position

        if diagnostic.type_name:
            data["type_name"] = diagnostic.type_name

        if diagnostic.radix is not None:
            data["radix"] = diagnostic.radix

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

