"""Scan exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Errors are only ever raised before a scan begins; once inputs are
validated the scan loop cannot fail.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["InvalidRangeError", "InvalidSpecError", "NumScanError"]


class NumScanError(Exception):
    """Base exception for all scan errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumScanError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Stable error code, or None for plain-message errors."""
        return self.diagnostic.code if self.diagnostic is not None else None


class InvalidRangeError(NumScanError):
    """Search window is unusable.

    Raised for a text or window bound of the wrong type, a negative start
    index, a start index past the end of the text, or a window that
    contains no characters. Caller-correctable; never retried.
    """


class InvalidSpecError(NumScanError):
    """Scan configuration is unusable.

    Raised at construction time for an empty negative sign candidate set,
    a negative sign spec with neither a leading nor a trailing marker,
    markers containing digits, or empty terminators. Scanning never begins
    with a configuration that fails these checks.
    """
