"""Tests for diagnostics: codes, templates, exceptions and formatting."""

import json

import pytest

from numscanengine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    InvalidRangeError,
    InvalidSpecError,
    NumScanError,
    OutputFormat,
)


class TestDiagnosticCode:
    """Code numbering."""

    def test_values_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.START_INDEX_NEGATIVE, 1000, 1999),
            (DiagnosticCode.SEARCH_WINDOW_EMPTY, 1000, 1999),
            (DiagnosticCode.NEGATIVE_SIGN_SET_EMPTY, 2000, 2999),
            (DiagnosticCode.TERMINATOR_EMPTY, 2000, 2999),
            (DiagnosticCode.LOCALE_UNKNOWN, 3000, 3999),
        ],
    )
    def test_category_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestErrorTemplate:
    """Every template produces a diagnostic with its own code."""

    @pytest.mark.parametrize(
        ("diagnostic", "code"),
        [
            (ErrorTemplate.start_index_negative(-2), DiagnosticCode.START_INDEX_NEGATIVE),
            (
                ErrorTemplate.start_index_out_of_range(9, 4),
                DiagnosticCode.START_INDEX_OUT_OF_RANGE,
            ),
            (ErrorTemplate.search_window_empty(3, -1), DiagnosticCode.SEARCH_WINDOW_EMPTY),
            (
                ErrorTemplate.source_argument_invalid("start_index", "int", "1"),
                DiagnosticCode.SOURCE_ARGUMENT_INVALID,
            ),
            (ErrorTemplate.negative_sign_spec_empty(), DiagnosticCode.NEGATIVE_SIGN_SPEC_EMPTY),
            (ErrorTemplate.negative_sign_set_empty(), DiagnosticCode.NEGATIVE_SIGN_SET_EMPTY),
            (
                ErrorTemplate.spec_contains_digit("separator_chars", "1"),
                DiagnosticCode.SPEC_CONTAINS_DIGIT,
            ),
            (ErrorTemplate.terminator_empty(0), DiagnosticCode.TERMINATOR_EMPTY),
            (
                ErrorTemplate.spec_type_invalid("terminators", "TerminatorSet", []),
                DiagnosticCode.SPEC_TYPE_INVALID,
            ),
            (ErrorTemplate.locale_unknown("xx_YY", "unknown"), DiagnosticCode.LOCALE_UNKNOWN),
        ],
    )
    def test_codes(self, diagnostic: Diagnostic, code: DiagnosticCode) -> None:
        assert diagnostic.code is code
        assert diagnostic.message
        assert diagnostic.severity == "error"

    def test_out_of_range_mentions_values(self) -> None:
        diagnostic = ErrorTemplate.start_index_out_of_range(9, 4)

        assert "9" in diagnostic.message
        assert "4" in diagnostic.message
        assert diagnostic.argument_name == "start_index"
        assert diagnostic.received_value == "9"

    def test_type_invalid_names_received_type(self) -> None:
        diagnostic = ErrorTemplate.spec_type_invalid("negative_signs", "X", "-")

        assert "str" in diagnostic.message


class TestExceptions:
    """Exception hierarchy and diagnostic plumbing."""

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidRangeError, NumScanError)
        assert issubclass(InvalidSpecError, NumScanError)
        assert not issubclass(InvalidRangeError, InvalidSpecError)

    def test_diagnostic_message(self) -> None:
        error = InvalidSpecError(ErrorTemplate.negative_sign_set_empty())

        assert error.code is DiagnosticCode.NEGATIVE_SIGN_SET_EMPTY
        assert str(error).startswith("error[NEGATIVE_SIGN_SET_EMPTY]:")

    def test_plain_message(self) -> None:
        error = NumScanError("plain")

        assert error.diagnostic is None
        assert error.code is None
        assert str(error) == "plain"


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.start_index_negative(-1))

        lines = output.splitlines()
        assert lines[0] == "error[START_INDEX_NEGATIVE]: Start index -1 is less than zero"
        assert "  = argument: start_index" in lines
        assert "  = received: -1" in lines
        assert lines[-1].startswith("  = help:")

    def test_rust_format_with_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(ErrorTemplate.terminator_empty(0))

        assert output.startswith("\033[1;31merror\033[0m[TERMINATOR_EMPTY]")

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert (
            formatter.format(ErrorTemplate.negative_sign_set_empty())
            == "NEGATIVE_SIGN_SET_EMPTY: Negative sign candidate set is empty"
        )

    def test_json_format_drops_missing_fields(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.negative_sign_spec_empty()))

        assert data["code"] == "NEGATIVE_SIGN_SPEC_EMPTY"
        assert data["code_value"] == 2001
        assert "argument" not in data
        assert "received" not in data

    def test_control_characters_escaped(self) -> None:
        diagnostic = ErrorTemplate.spec_contains_digit("terminators", "\n1")
        output = DiagnosticFormatter().format(diagnostic)

        assert "  = received: '\\n1'" in output.splitlines()

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.negative_sign_set_empty(), ErrorTemplate.terminator_empty(1)]
        )

        assert output.count("\n\n") == 1
