"""Immutable scan results.

ParseResult describes what the scanner saw (flags and indexes);
NumericValue carries the number itself as sign plus digit runs.
Both are created fresh for every scan and never mutated afterwards.

Python 3.11+.
"""

from dataclasses import dataclass
from decimal import Decimal

from numscanengine.enums import NumericSign, ScanState, SignPosition

__all__ = ["NumericValue", "ParseResult"]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Diagnostic flags and indexes from a single scan.

    Attributes:
        found_numeric_digits: At least one digit was consumed
        found_non_zero_value: At least one digit other than '0' was consumed
        found_decimal_separator: The decimal separator was consumed
        found_decimal_digits: At least one fractional digit was consumed
        negative_sign_found: A complete negative sign was matched
        negative_sign_position: Where the matched sign sits
        first_digit_index: Index of the first consumed digit
        next_unparsed_index: First index not consumed by the scan
        remainder_chars: Text from next_unparsed_index to the end of the
            whole buffer, only when requested
        final_state: Terminal scanner state
        reached_search_limit: Scan ran to a window end that lies before the
            end of the buffer
        negative_sign_candidate_index: Which candidate matched
        negative_sign_index: Index of the matched leading marker, or of the
            trailing marker for trailing-only signs
        decimal_separator_index: Index of the consumed decimal separator
        terminator_index: Which terminator stopped the scan
        start_index: Window start
        window_end: Window end (exclusive)
    """

    found_numeric_digits: bool
    found_non_zero_value: bool
    found_decimal_separator: bool
    found_decimal_digits: bool
    negative_sign_found: bool
    negative_sign_position: SignPosition
    first_digit_index: int | None
    next_unparsed_index: int
    remainder_chars: str | None
    final_state: ScanState
    reached_search_limit: bool = False
    negative_sign_candidate_index: int | None = None
    negative_sign_index: int | None = None
    decimal_separator_index: int | None = None
    terminator_index: int | None = None
    start_index: int = 0
    window_end: int = 0

    @property
    def stopped_at_terminator(self) -> bool:
        return self.terminator_index is not None


@dataclass(frozen=True, slots=True)
class NumericValue:
    """Sign plus integer and fractional digit runs.

    Example:
        >>> value = NumericValue(is_negative=True, integer_digits="123", fractional_digits="45")
        >>> value.text
        '-123.45'
        >>> value.to_decimal()
        Decimal('-123.45')
        >>> value.sign
        <NumericSign.NEGATIVE: 'negative'>
    """

    is_negative: bool = False
    integer_digits: str = ""
    fractional_digits: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.integer_digits and not self.fractional_digits

    @property
    def sign(self) -> NumericSign:
        """Sign of the value; all-zero digit runs are ZERO even when marked negative."""
        if not (self.integer_digits + self.fractional_digits).strip("0"):
            return NumericSign.ZERO
        return NumericSign.NEGATIVE if self.is_negative else NumericSign.POSITIVE

    @property
    def text(self) -> str:
        """Canonical ``[-]int[.frac]`` rendering (not locale formatting).

        Empty runs render as "0"; the minus sign is kept even for zero.
        """
        integer = self.integer_digits or "0"
        body = f"{integer}.{self.fractional_digits}" if self.fractional_digits else integer
        return f"-{body}" if self.is_negative else body

    def to_decimal(self) -> Decimal:
        """Exact Decimal for the digit runs (scale preserved: '1.50' -> Decimal('1.50'))."""
        return Decimal(self.text)
