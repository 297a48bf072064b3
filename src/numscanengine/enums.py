"""Enumerations for NumScanEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

from enum import StrEnum


class SignPosition(StrEnum):
    """Where a negative sign marker sits relative to the digits.

    StrEnum provides automatic string conversion: str(SignPosition.BEFORE) == "before"
    """

    NONE = "none"
    """No negative sign found."""

    BEFORE = "before"
    """Leading marker: -123"""

    AFTER = "after"
    """Trailing marker: 123-"""

    BEFORE_AND_AFTER = "before_and_after"
    """Bracketing markers: (123)"""


class ScanState(StrEnum):
    """State of the number scanner.

    SCANNING and ACCUMULATING_FRACTION are working states; the three
    COMPLETED* states are terminal and reported in ParseResult.final_state.
    """

    SCANNING = "scanning"
    """Looking for (or accumulating) integer digits."""

    ACCUMULATING_FRACTION = "accumulating_fraction"
    """Decimal separator consumed, accumulating fractional digits."""

    COMPLETED = "completed"
    """Number ended at a character that is not part of it."""

    COMPLETED_AT_TERMINATOR = "completed_at_terminator"
    """Stopped at a terminator, or at a trailing sign ending the integer run."""

    COMPLETED_AT_END = "completed_at_end"
    """Search window exhausted."""


class NumericSign(StrEnum):
    """Sign of a scanned numeric value.

    ZERO is reported when every digit is '0', regardless of any sign marker.
    """

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"


__all__ = [
    "NumericSign",
    "ScanState",
    "SignPosition",
]
