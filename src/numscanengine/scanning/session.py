"""Per-call mutable scan state.

A ScanSession is created by ScanEngine.parse() for exactly one scan and
discarded afterwards. It owns every mutable field of a scan (cursor,
digit runs, matched sign candidate, open bracket); specs stay frozen.

Python 3.11+.
"""

from dataclasses import dataclass, field

from numscanengine.enums import ScanState, SignPosition
from numscanengine.scanning.results import NumericValue, ParseResult
from numscanengine.scanning.source import RuneSource

__all__ = ["ScanSession"]

_TERMINAL_STATES = frozenset(
    {ScanState.COMPLETED, ScanState.COMPLETED_AT_TERMINATOR, ScanState.COMPLETED_AT_END}
)


@dataclass(slots=True)
class ScanSession:
    """Mutable bookkeeping for one scan over ``source``."""

    source: RuneSource
    cursor: int = field(init=False)
    state: ScanState = ScanState.SCANNING

    integer_digits: list[str] = field(default_factory=list)
    fractional_digits: list[str] = field(default_factory=list)
    found_non_zero_value: bool = False
    first_digit_index: int | None = None
    decimal_separator_index: int | None = None
    terminator_index: int | None = None

    # Complete negative sign
    matched: bool = False
    matched_candidate_index: int | None = None
    sign_position: SignPosition = SignPosition.NONE
    sign_index: int | None = None

    # Bracket whose leading side matched; negative only once closed
    pending_bracket_index: int | None = None
    pending_bracket_start: int | None = None

    def __post_init__(self) -> None:
        self.cursor = self.source.start_index

    @property
    def is_done(self) -> bool:
        return self.state in _TERMINAL_STATES

    @property
    def found_numeric_digits(self) -> bool:
        return self.first_digit_index is not None

    @property
    def can_match_leading(self) -> bool:
        """Leading markers are only looked for before the first digit."""
        return not self.matched and not self.found_numeric_digits

    @property
    def can_match_trailing(self) -> bool:
        """Trailing markers need digits and no one-sided leading sign."""
        return not self.matched and bool(self.integer_digits)

    @property
    def at_window_end(self) -> bool:
        return self.cursor >= self.source.window_end

    def current(self) -> str:
        return self.source.char_at(self.cursor)

    # Transitions ------------------------------------------------------------

    def skip_noise(self) -> None:
        self.cursor += 1

    def accept_integer_digit(self, char: str) -> None:
        self._note_digit(char)
        self.integer_digits.append(char)
        self.cursor += 1

    def accept_fraction_digit(self, char: str) -> None:
        self._note_digit(char)
        self.fractional_digits.append(char)
        self.cursor += 1

    def accept_decimal_separator(self, length: int) -> None:
        self.decimal_separator_index = self.cursor
        self.cursor += length
        self.state = ScanState.ACCUMULATING_FRACTION

    def accept_leading_sign(self, candidate_index: int, length: int, *, is_bracket: bool) -> None:
        if is_bracket:
            self.pending_bracket_index = candidate_index
            self.pending_bracket_start = self.cursor
        else:
            self._record_sign(candidate_index, SignPosition.BEFORE, self.cursor)
            self.pending_bracket_index = None
            self.pending_bracket_start = None
        self.cursor += length

    def accept_trailing_sign(self, candidate_index: int, length: int) -> None:
        if candidate_index == self.pending_bracket_index:
            self._record_sign(
                candidate_index, SignPosition.BEFORE_AND_AFTER, self.pending_bracket_start
            )
        else:
            self._record_sign(candidate_index, SignPosition.AFTER, self.cursor)
        self.cursor += length

    def stop_at_terminator(self, terminator_index: int) -> None:
        self.terminator_index = terminator_index
        self.state = ScanState.COMPLETED_AT_TERMINATOR

    def finish(self, state: ScanState) -> None:
        self.state = state

    # Assembly ---------------------------------------------------------------

    def build(self, *, include_remainder: bool) -> tuple[ParseResult, NumericValue]:
        """Assemble the immutable result pair from the final session state.

        A sign that never got digits attached ("abc -") is dropped: without
        a number it is just another noise character.
        """
        has_digits = self.found_numeric_digits
        sign_found = self.matched and has_digits
        remainder = self.source.slice_from(self.cursor) if include_remainder else None

        result = ParseResult(
            found_numeric_digits=has_digits,
            found_non_zero_value=self.found_non_zero_value,
            found_decimal_separator=self.decimal_separator_index is not None,
            found_decimal_digits=bool(self.fractional_digits),
            negative_sign_found=sign_found,
            negative_sign_position=self.sign_position if sign_found else SignPosition.NONE,
            first_digit_index=self.first_digit_index,
            next_unparsed_index=self.cursor,
            remainder_chars=remainder,
            final_state=self.state,
            reached_search_limit=(
                self.state is ScanState.COMPLETED_AT_END and self.source.is_truncated
            ),
            negative_sign_candidate_index=self.matched_candidate_index if sign_found else None,
            negative_sign_index=self.sign_index if sign_found else None,
            decimal_separator_index=self.decimal_separator_index,
            terminator_index=self.terminator_index,
            start_index=self.source.start_index,
            window_end=self.source.window_end,
        )
        value = NumericValue(
            is_negative=sign_found,
            integer_digits="".join(self.integer_digits),
            fractional_digits="".join(self.fractional_digits),
        )
        return result, value

    def _note_digit(self, char: str) -> None:
        if self.first_digit_index is None:
            self.first_digit_index = self.cursor
        if char != "0":
            self.found_non_zero_value = True

    def _record_sign(self, candidate_index: int, position: SignPosition, index: int | None) -> None:
        self.matched = True
        self.matched_candidate_index = candidate_index
        self.sign_position = position
        self.sign_index = index
