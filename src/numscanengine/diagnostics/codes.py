"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages for scan
configuration and search-window failures.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Search window errors (start index, search length)
        2000-2999: Specification errors (negative signs, separators, terminators)
        3000-3999: Locale errors (preset derivation from CLDR data)
    """

    # Search window errors (1000-1999)
    START_INDEX_NEGATIVE = 1001
    START_INDEX_OUT_OF_RANGE = 1002
    SEARCH_WINDOW_EMPTY = 1003
    SOURCE_ARGUMENT_INVALID = 1004

    # Specification errors (2000-2999)
    NEGATIVE_SIGN_SPEC_EMPTY = 2001
    NEGATIVE_SIGN_SET_EMPTY = 2002
    SPEC_CONTAINS_DIGIT = 2003
    TERMINATOR_EMPTY = 2004
    SPEC_TYPE_INVALID = 2005

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        argument_name: Name of the argument that was rejected
        received_value: Offending value, rendered with repr()
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    argument_name: str | None = None
    received_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[START_INDEX_OUT_OF_RANGE]: Start index 9 is beyond ...
              = argument: start_index
              = received: 9
              = help: Use a start index between 0 and the text length

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
