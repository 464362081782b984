"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for money formatting.
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
        1000-1999: Currency registry errors
        2000-2999: Formatting errors (print side)
        3000-3999: Parsing errors (strict parse side)
    """

    # Currency registry errors (1000-1999)
    CURRENCY_UNKNOWN = 1001
    CURRENCY_MISMATCH = 1002

    # Formatting errors (2000-2999)
    PRINT_SINK_FAILED = 2001
    PRINT_UNSUPPORTED = 2002
    PARSE_UNSUPPORTED = 2003

    # Parsing errors (3000-3999)
    PARSE_ERROR_AT_INDEX = 3001
    PARSE_UNPARSED_TEXT = 3002
    PARSE_INCOMPLETE = 3003
    PARSE_MISSING_CURRENCY = 3004
    PARSE_MISSING_AMOUNT = 3005
    PARSE_MISSING_RATE = 3006


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        index: Character offset in the parsed text (None for non-parse errors)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    index: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with its code, location and hint.

        Example output:
            error[PARSE_ERROR_AT_INDEX]: Text could not be parsed at index 6: 12.34 GBX
              --> index 6
              = help: Check the input against the formatter pattern

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.index is not None:
            lines.append(f"  --> index {self.index}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
