"""Tests for the numscan command-line front end."""

from __future__ import annotations

import json

import pytest

from numscanengine.cli import build_parser, build_symbols, main
from numscanengine.scanning import NegativeSignCandidateSet, NegativeSignSpec


class TestBuildSymbols:
    """Argument to NumberSymbols mapping."""

    def test_default_sign_mode_is_leading(self) -> None:
        symbols = build_symbols(build_parser().parse_args(["x"]))

        assert symbols.negative_signs == NegativeSignCandidateSet.leading("-")
        assert symbols.decimal_separator.separator_chars == "."

    def test_extra_markers_appended(self) -> None:
        args = build_parser().parse_args(
            ["x", "--sign-mode", "us", "--trailing", "CR", "--leading", "~"]
        )
        signs = list(build_symbols(args).negative_signs)

        assert signs[:2] == list(NegativeSignCandidateSet.united_states())
        assert signs[2:] == [NegativeSignSpec.leading("~"), NegativeSignSpec.trailing("CR")]

    def test_decimal_and_terminators(self) -> None:
        args = build_parser().parse_args(["x", "--decimal", ",", "--terminator", ";"])
        symbols = build_symbols(args)

        assert symbols.decimal_separator.separator_chars == ","
        assert symbols.terminators.terminators == (";",)


class TestMain:
    """Exit codes and output."""

    def test_leading_sign(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["Balance: -123.45 USD"]) == 0

        out = capsys.readouterr().out
        assert "found: yes" in out
        assert "value: -123.45" in out
        assert "negative sign: before" in out
        assert "state: completed" in out

    def test_trailing_sign(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["100-", "--sign-mode", "trailing"]) == 0

        assert "value: -100" in capsys.readouterr().out

    def test_terminator(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["(1,250.75)", "--sign-mode", "parentheses", "--terminator", ","]) == 0

        out = capsys.readouterr().out
        assert "value: 1\n" in out
        assert "state: completed_at_terminator" in out

    def test_no_number(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["abc"]) == 0

        out = capsys.readouterr().out
        assert "found: no" in out
        assert "value:" not in out

    def test_remainder(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["7 apples", "--remainder"]) == 0

        assert "remainder: ' apples'" in capsys.readouterr().out

    def test_window(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["12 34", "--start", "3", "--length", "1"]) == 0

        assert "value: 3\n" in capsys.readouterr().out

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["x (5.25)", "--sign-mode", "us", "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["negative_sign_position"] == "before_and_after"
        assert payload["first_digit_index"] == 3
        assert payload["value"]["text"] == "-5.25"
        assert payload["value"]["sign"] == "negative"

    def test_all(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["3 apples, -2 pears; 0.5 kg", "--all"]) == 0

        assert capsys.readouterr().out.splitlines() == ["3", "-2", "0.5"]

    def test_all_respects_length(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["12 34 56", "--all", "--length", "3"]) == 0

        assert capsys.readouterr().out.splitlines() == ["12"]

    def test_all_respects_start_and_length(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["12 34 56", "--all", "--start", "3", "--length", "3"]) == 0

        assert capsys.readouterr().out.splitlines() == ["34"]

    def test_all_with_remainder(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1 2", "--all", "--remainder"]) == 0

        assert capsys.readouterr().out.splitlines() == ["1\t' 2'", "2\t''"]

    def test_all_json_with_remainder(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1 2", "--all", "--remainder", "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert [p["remainder_chars"] for p in payload] == [" 2", ""]

    def test_all_bad_start_exit_code(self) -> None:
        assert main(["12", "--all", "--start", "5"]) == 2

    def test_all_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1 2", "--all", "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert [p["value"]["text"] for p in payload] == ["1", "2"]

    def test_empty_window_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([""]) == 2

        assert "SEARCH_WINDOW_EMPTY" in capsys.readouterr().err

    def test_bad_start_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["12", "--start", "5"]) == 2

        assert "START_INDEX_OUT_OF_RANGE" in capsys.readouterr().err

    def test_digit_marker_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["12", "--leading", "1"]) == 1

        assert "SPEC_CONTAINS_DIGIT" in capsys.readouterr().err

    def test_empty_terminator_exit_code(self) -> None:
        assert main(["12", "--terminator", ""]) == 1

    def test_locale(self, capsys: pytest.CaptureFixture[str]) -> None:
        pytest.importorskip("babel")

        assert main(["Saldo: -1234,56 EUR", "--locale", "lv-LV"]) == 0

        assert "value: -1234.56" in capsys.readouterr().out

    def test_unknown_locale_exit_code(self) -> None:
        pytest.importorskip("babel")

        assert main(["12", "--locale", "xx_INVALID"]) == 1
