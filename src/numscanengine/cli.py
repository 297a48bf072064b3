"""Command-line front end for the number scanner.

Usage:
    numscan "Balance: -123.45 USD"
    numscan "100-" --sign-mode trailing
    numscan "(1,250.75)" --sign-mode parentheses --terminator ,
    numscan "Saldo: -1234,56 EUR" --locale lv-LV --json
    numscan "3 apples, -2 pears" --all

Exit Codes:
    0   Scan ran (whether or not a number was found)
    1   Invalid configuration (empty sign set, digit in a marker, unknown locale)
    2   Invalid search window (bad start index, empty window)

Python 3.11+.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from collections.abc import Sequence

from numscanengine.constants import DEFAULT_DECIMAL_SEPARATOR, SEARCH_TO_END
from numscanengine.diagnostics import InvalidRangeError, InvalidSpecError, NumScanError
from numscanengine.parsing import NumberSymbols, iter_numbers
from numscanengine.scanning import (
    DecimalSeparatorSpec,
    NegativeSignCandidateSet,
    NegativeSignSpec,
    NumericValue,
    ParseResult,
    TerminatorSet,
)

__all__ = ["build_parser", "build_symbols", "main"]

logger = logging.getLogger(__name__)

_SIGN_MODES = {
    "leading": NegativeSignCandidateSet.leading,
    "trailing": NegativeSignCandidateSet.trailing,
    "parentheses": NegativeSignCandidateSet.parentheses,
    "us": NegativeSignCandidateSet.united_states,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numscan",
        description="Find the first number in a text using configurable sign conventions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  numscan "Balance: -123.45 USD"
  numscan "100-" --sign-mode trailing
  numscan "(1,250.75)" --sign-mode parentheses --terminator ,
  numscan "Saldo: -1234,56 EUR" --locale lv-LV --json
""",
    )
    parser.add_argument("text", help="Text to scan")
    parser.add_argument("--start", type=int, default=0, help="Start index (default: 0)")
    parser.add_argument(
        "--length",
        type=int,
        default=SEARCH_TO_END,
        help="Characters to search; -1 scans to the end (default: -1)",
    )
    parser.add_argument(
        "--sign-mode",
        choices=sorted(_SIGN_MODES),
        default="leading",
        help="Built-in negative sign convention (default: leading)",
    )
    parser.add_argument(
        "--leading",
        action="append",
        default=[],
        metavar="CHARS",
        help="Extra leading negative marker (repeatable, lowest precedence)",
    )
    parser.add_argument(
        "--trailing",
        action="append",
        default=[],
        metavar="CHARS",
        help="Extra trailing negative marker (repeatable, lowest precedence)",
    )
    parser.add_argument(
        "--decimal",
        default=None,
        metavar="CHARS",
        help="Decimal separator; empty string disables fractions (default: '.')",
    )
    parser.add_argument(
        "--terminator",
        action="append",
        default=[],
        metavar="CHARS",
        help="Sequence that stops the scan (repeatable)",
    )
    parser.add_argument(
        "--locale",
        default=None,
        help="Derive signs and decimal separator from CLDR data (needs Babel)",
    )
    parser.add_argument(
        "--remainder", action="store_true", help="Include the unparsed remainder"
    )
    parser.add_argument("--all", action="store_true", help="Report every number in the text")
    parser.add_argument("--json", action="store_true", help="Emit JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def build_symbols(args: argparse.Namespace) -> NumberSymbols:
    """Assemble NumberSymbols from parsed arguments.

    Raises:
        InvalidSpecError: If the resulting configuration is invalid
    """
    if args.locale:
        base = NumberSymbols.from_locale(args.locale)
        signs = base.negative_signs
        decimal = base.decimal_separator
    else:
        signs = _SIGN_MODES[args.sign_mode]()
        decimal = DecimalSeparatorSpec(DEFAULT_DECIMAL_SEPARATOR)

    for chars in args.leading:
        signs = signs.with_candidate(NegativeSignSpec.leading(chars))
    for chars in args.trailing:
        signs = signs.with_candidate(NegativeSignSpec.trailing(chars))
    if args.decimal is not None:
        decimal = DecimalSeparatorSpec(args.decimal)

    return NumberSymbols(
        negative_signs=signs,
        decimal_separator=decimal,
        terminators=TerminatorSet(tuple(args.terminator)),
        locale_code=args.locale,
    )


def _as_dict(result: ParseResult, value: NumericValue) -> dict[str, object]:
    payload: dict[str, object] = dataclasses.asdict(result)
    payload["value"] = {
        **dataclasses.asdict(value),
        "text": value.text if result.found_numeric_digits else None,
        "sign": value.sign,
    }
    return payload


def _render_text(result: ParseResult, value: NumericValue) -> str:
    lines = [f"found: {'yes' if result.found_numeric_digits else 'no'}"]
    if result.found_numeric_digits:
        lines.append(f"value: {value.text}")
        lines.append(f"negative sign: {result.negative_sign_position}")
        lines.append(f"first digit index: {result.first_digit_index}")
    lines.append(f"next unparsed index: {result.next_unparsed_index}")
    lines.append(f"state: {result.final_state}")
    if result.remainder_chars is not None:
        lines.append(f"remainder: {result.remainder_chars!r}")
    return "\n".join(lines)


def _render_line(result: ParseResult, value: NumericValue) -> str:
    if result.remainder_chars is None:
        return value.text
    return f"{value.text}\t{result.remainder_chars!r}"


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        symbols = build_symbols(args)
        if args.all:
            pairs = list(
                iter_numbers(
                    args.text,
                    symbols,
                    start_index=args.start,
                    search_length=args.length,
                    include_remainder=args.remainder,
                )
            )
        else:
            pairs = [
                symbols.engine().scan(
                    args.text, args.start, args.length, include_remainder=args.remainder
                )
            ]
    except InvalidSpecError as e:
        print(str(e), file=sys.stderr)
        return 1
    except InvalidRangeError as e:
        print(str(e), file=sys.stderr)
        return 2
    except NumScanError as e:  # pragma: no cover - no other subclasses today
        print(str(e), file=sys.stderr)
        return 1

    logger.debug("Reporting %d scan result(s)", len(pairs))
    if args.json:
        payloads = [_as_dict(r, v) for r, v in pairs]
        print(json.dumps(payloads if args.all else payloads[0], ensure_ascii=False))
    elif args.all:
        print("\n".join(_render_line(r, v) for r, v in pairs))
    else:
        print(_render_text(*pairs[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
