"""Number scanning engine.

Finds the first number in a search window in one left-to-right pass,
recognizing configurable negative signs, a decimal separator, and
terminators that stop the scan early.

Architecture:
    - ScanEngine: frozen configuration (specs), reusable and thread-safe
    - ScanSession: per-call mutable state, created inside parse()
    - ParseResult / NumericValue: immutable output

At every cursor position the checks run in a fixed order: digit,
terminator, negative sign, decimal separator, and finally "noise".

Scanning Rules:
    - Characters before the first digit that match nothing are skipped,
      so numbers can be found inside sentences ("Balance: -5").
    - Once digits have started, any character that matches nothing ends
      the number: numbers are contiguous.
    - Leading signs are only looked for before the first digit; trailing
      signs only after at least one integer digit, and they end the scan.
    - A bracket sign such as "(...)" only makes the number negative when
      its closing marker follows the digits.
    - The decimal separator needs at least one integer digit before it.
      ".45" therefore scans as the integer 45 with the dot skipped as
      noise. A bare separator never starts a number.

Errors:
    Only structural problems raise, and always before the first character
    is read: an empty window (InvalidRangeError) or bad configuration
    (InvalidSpecError). "No number found" is a normal result with
    found_numeric_digits=False.

Python 3.11+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from numscanengine.constants import ASCII_DIGITS, SEARCH_TO_END
from numscanengine.diagnostics import (
    ErrorTemplate,
    InvalidRangeError,
    InvalidSpecError,
)
from numscanengine.enums import ScanState
from numscanengine.scanning.results import NumericValue, ParseResult
from numscanengine.scanning.session import ScanSession
from numscanengine.scanning.source import RuneSource
from numscanengine.scanning.specs import (
    DecimalSeparatorSpec,
    NegativeSignCandidateSet,
    NegativeSignSpec,
    TerminatorSet,
)

__all__ = ["ScanEngine", "scan_number"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanEngine:
    """Stateless number scanner bound to one set of specs.

    Build once (e.g. per locale) and call parse() from any thread.

    Example:
        >>> engine = ScanEngine(NegativeSignCandidateSet.leading("-"))
        >>> result, value = engine.scan("Balance: -123.45 USD")
        >>> value.text
        '-123.45'
        >>> result.negative_sign_position
        <SignPosition.BEFORE: 'before'>
    """

    negative_signs: NegativeSignCandidateSet
    decimal_separator: DecimalSeparatorSpec = field(default_factory=DecimalSeparatorSpec.default)
    terminators: TerminatorSet = field(default_factory=TerminatorSet)

    def __post_init__(self) -> None:
        """Reject configuration objects of the wrong type.

        Raises:
            InvalidSpecError: If any spec has the wrong type
        """
        checks = (
            ("negative_signs", self.negative_signs, NegativeSignCandidateSet),
            ("decimal_separator", self.decimal_separator, DecimalSeparatorSpec),
            ("terminators", self.terminators, TerminatorSet),
        )
        for name, value, expected in checks:
            if not isinstance(value, expected):
                raise InvalidSpecError(
                    ErrorTemplate.spec_type_invalid(name, expected.__name__, value)
                )

    def parse(
        self, source: RuneSource, *, include_remainder: bool = False
    ) -> tuple[ParseResult, NumericValue]:
        """Scan ``source`` for its first number.

        Args:
            source: Text and search window
            include_remainder: Populate ParseResult.remainder_chars with the
                text from next_unparsed_index to the end of the buffer

        Returns:
            Tuple of (ParseResult, NumericValue)

        Raises:
            InvalidRangeError: If the search window is empty
        """
        if source.is_window_empty:
            raise InvalidRangeError(
                ErrorTemplate.search_window_empty(source.start_index, source.search_length)
            )

        session = ScanSession(source)
        while not session.is_done:
            if session.at_window_end:
                session.finish(ScanState.COMPLETED_AT_END)
            elif session.state is ScanState.SCANNING:
                self._step_scanning(session)
            else:
                self._step_fraction(session)

        result, value = session.build(include_remainder=include_remainder)
        logger.debug(
            "Scanned window [%d, %d): state=%s digits=%s next=%d",
            result.start_index,
            result.window_end,
            result.final_state,
            value.text if result.found_numeric_digits else None,
            result.next_unparsed_index,
        )
        return result, value

    def scan(
        self,
        text: str,
        start_index: int = 0,
        search_length: int = SEARCH_TO_END,
        *,
        include_remainder: bool = False,
    ) -> tuple[ParseResult, NumericValue]:
        """Build a RuneSource over ``text`` and parse it.

        Raises:
            InvalidRangeError: If the window is invalid or empty
        """
        return self.parse(
            RuneSource(text, start_index, search_length), include_remainder=include_remainder
        )

    # State handlers ---------------------------------------------------------

    def _step_scanning(self, session: ScanSession) -> None:
        source = session.source
        cursor = session.cursor
        char = session.current()

        if char in ASCII_DIGITS:
            session.accept_integer_digit(char)
            return

        terminator = self.terminators.match_at(source, cursor)
        if terminator is not None:
            session.stop_at_terminator(terminator[0])
            return

        if session.found_numeric_digits:
            trailing = self._match_trailing(session)
            if trailing is not None:
                session.accept_trailing_sign(*trailing)
                session.finish(ScanState.COMPLETED_AT_TERMINATOR)
                return
            separator_length = self.decimal_separator.match_at(source, cursor)
            if separator_length:
                session.accept_decimal_separator(separator_length)
                return
            session.finish(ScanState.COMPLETED)
            return

        if session.can_match_leading:
            leading = self.negative_signs.match_leading_at(source, cursor)
            if leading is not None:
                candidate_index, length = leading
                session.accept_leading_sign(
                    candidate_index,
                    length,
                    is_bracket=self.negative_signs[candidate_index].is_bracket,
                )
                return

        session.skip_noise()

    def _step_fraction(self, session: ScanSession) -> None:
        char = session.current()

        if char in ASCII_DIGITS:
            session.accept_fraction_digit(char)
            return

        terminator = self.terminators.match_at(session.source, session.cursor)
        if terminator is not None:
            session.stop_at_terminator(terminator[0])
            return

        trailing = self._match_trailing(session)
        if trailing is not None:
            session.accept_trailing_sign(*trailing)

        session.finish(ScanState.COMPLETED)

    def _match_trailing(self, session: ScanSession) -> tuple[int, int] | None:
        if not session.can_match_trailing:
            return None

        pending = session.pending_bracket_index

        def eligible(index: int, candidate: NegativeSignSpec) -> bool:
            # A bracket only closes if its own opening marker was seen
            return not candidate.is_bracket or index == pending

        return self.negative_signs.match_trailing_at(
            session.source, session.cursor, eligible=eligible
        )


def scan_number(
    source: RuneSource,
    negative_signs: NegativeSignCandidateSet,
    decimal_separator: DecimalSeparatorSpec,
    terminators: TerminatorSet,
    *,
    include_remainder: bool = False,
) -> tuple[ParseResult, NumericValue]:
    """Scan ``source`` for its first number in a single call.

    Equivalent to ``ScanEngine(negative_signs, decimal_separator,
    terminators).parse(source, include_remainder=...)``.

    Args:
        source: Text and search window
        negative_signs: Negative sign candidates, in precedence order
        decimal_separator: Fraction boundary (empty spec disables fractions)
        terminators: Sequences that stop the scan unconsumed
        include_remainder: Populate ParseResult.remainder_chars

    Returns:
        Tuple of (ParseResult, NumericValue)

    Raises:
        InvalidSpecError: If any spec has the wrong type
        InvalidRangeError: If the search window is empty

    Example:
        >>> result, value = scan_number(
        ...     RuneSource("100-"),
        ...     NegativeSignCandidateSet.trailing("-"),
        ...     DecimalSeparatorSpec("."),
        ...     TerminatorSet(),
        ... )
        >>> value.is_negative, value.integer_digits
        (True, '100')
    """
    engine = ScanEngine(negative_signs, decimal_separator, terminators)
    return engine.parse(source, include_remainder=include_remainder)
