"""Hypothesis-based property tests for the scanning engine.

Invariants checked on arbitrary text and arbitrary engine configuration:
- every scan ends in a terminal state
- next_unparsed_index stays inside the window
- result flags agree with the numeric value
- numbers embedded in noise are recovered exactly
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from numscanengine.constants import ASCII_DIGITS
from numscanengine.enums import ScanState, SignPosition
from numscanengine.scanning import ScanEngine
from tests.strategies.scanning import (
    EmbeddedNumber,
    embedded_number_engine,
    embedded_numbers,
    scan_engines,
    scan_texts,
)

_TERMINAL_STATES = {
    ScanState.COMPLETED,
    ScanState.COMPLETED_AT_TERMINATOR,
    ScanState.COMPLETED_AT_END,
}


class TestScanInvariants:
    """Structural guarantees that hold for any input."""

    @given(engine=scan_engines(), text=scan_texts, data=st.data())
    def test_terminates_inside_window(
        self, engine: ScanEngine, text: str, data: st.DataObject
    ) -> None:
        """Every scan terminates with next_unparsed_index inside the window."""
        start = data.draw(st.integers(min_value=0, max_value=len(text) - 1))
        length = data.draw(st.integers(min_value=-1, max_value=len(text)).filter(bool))

        result, _ = engine.scan(text, start, length)

        assert result.final_state in _TERMINAL_STATES
        assert result.start_index <= result.next_unparsed_index <= result.window_end
        assert result.window_end <= len(text)

    @given(engine=scan_engines(), text=scan_texts)
    def test_flags_agree_with_value(self, engine: ScanEngine, text: str) -> None:
        """ParseResult flags describe the NumericValue exactly."""
        result, value = engine.scan(text)

        assert result.found_numeric_digits == bool(value.integer_digits)
        assert result.found_decimal_digits == bool(value.fractional_digits)
        assert result.negative_sign_found == value.is_negative
        assert result.found_non_zero_value == any(
            c != "0" for c in value.integer_digits + value.fractional_digits
        )
        if result.found_decimal_digits:
            assert result.found_decimal_separator
        if not result.negative_sign_found:
            assert result.negative_sign_position is SignPosition.NONE
            assert result.negative_sign_index is None

    @given(engine=scan_engines(), text=scan_texts)
    def test_integer_run_is_contiguous(self, engine: ScanEngine, text: str) -> None:
        """The integer digits are a contiguous ASCII run at first_digit_index."""
        result, value = engine.scan(text)

        if not result.found_numeric_digits:
            assert result.first_digit_index is None
            return
        first = result.first_digit_index
        assert first is not None
        assert text[first : first + len(value.integer_digits)] == value.integer_digits
        assert all(c in ASCII_DIGITS for c in value.integer_digits)
        assert all(c in ASCII_DIGITS for c in value.fractional_digits)

    @given(engine=scan_engines(), text=scan_texts)
    def test_remainder_matches_next_unparsed(self, engine: ScanEngine, text: str) -> None:
        """remainder_chars is exactly the text after next_unparsed_index."""
        result, _ = engine.scan(text, include_remainder=True)

        assert result.remainder_chars == text[result.next_unparsed_index :]

    @given(engine=scan_engines(), text=scan_texts)
    def test_scan_is_deterministic(self, engine: ScanEngine, text: str) -> None:
        """The same engine and text always produce the same result."""
        assert engine.scan(text) == engine.scan(text)


class TestEmbeddedNumbers:
    """Numbers surrounded by noise are recovered exactly."""

    @given(number=embedded_numbers())
    def test_value_recovered(self, number: EmbeddedNumber) -> None:
        result, value = embedded_number_engine().scan(number.text)

        assert value.is_negative == number.is_negative
        assert value.integer_digits == number.integer_digits
        assert value.fractional_digits == number.fractional_digits
        assert result.first_digit_index == number.first_digit_index
        assert result.final_state is not ScanState.COMPLETED_AT_END
