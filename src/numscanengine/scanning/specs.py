"""Scan configuration: negative signs, decimal separator, terminators.

All specs are frozen dataclasses validated at construction. They are
meant to be built once (typically per locale) and shared read-only across
any number of concurrent scans; match outcomes are recorded in a per-call
ScanSession, never in the spec itself.

Matching is a linear, first-match-wins scan in collection order.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from numscanengine.constants import (
    ASCII_DIGITS,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_MINUS_SIGN,
    DEFAULT_PARENTHESES,
)
from numscanengine.diagnostics import ErrorTemplate, InvalidSpecError
from numscanengine.enums import SignPosition
from numscanengine.scanning.source import RuneSource

__all__ = [
    "DecimalSeparatorSpec",
    "NegativeSignCandidateSet",
    "NegativeSignSpec",
    "TerminatorSet",
]


def _as_chars(value: str | Sequence[str], argument_name: str) -> str:
    """Normalize a str or a sequence of single-character strings to str."""
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence) and all(isinstance(c, str) for c in value):
        return "".join(value)
    raise InvalidSpecError(ErrorTemplate.spec_type_invalid(argument_name, "str", value))


def _reject_digits(chars: str, field_name: str) -> None:
    if any(c in ASCII_DIGITS for c in chars):
        raise InvalidSpecError(ErrorTemplate.spec_contains_digit(field_name, chars))


@dataclass(frozen=True, slots=True)
class NegativeSignSpec:
    """One negative-number sign pattern.

    A spec with only ``leading_chars`` matches before the digits ("-5"),
    one with only ``trailing_chars`` matches after them ("5-"), and one
    with both is a bracket ("(5)") that only counts when both sides match.

    Identity is structural: two specs with the same markers are equal.

    Example:
        >>> NegativeSignSpec.leading("-").position
        <SignPosition.BEFORE: 'before'>
        >>> NegativeSignSpec.bracket("(", ")").position
        <SignPosition.BEFORE_AND_AFTER: 'before_and_after'>
        >>> NegativeSignSpec()
        Traceback (most recent call last):
        ...
        numscanengine.diagnostics.errors.InvalidSpecError: ...
    """

    leading_chars: str = ""
    trailing_chars: str = ""

    def __post_init__(self) -> None:
        """Validate markers.

        Raises:
            InvalidSpecError: If both markers are empty or either contains a digit
        """
        leading = _as_chars(self.leading_chars, "leading_chars")
        trailing = _as_chars(self.trailing_chars, "trailing_chars")
        object.__setattr__(self, "leading_chars", leading)
        object.__setattr__(self, "trailing_chars", trailing)

        if not leading and not trailing:
            raise InvalidSpecError(ErrorTemplate.negative_sign_spec_empty())
        _reject_digits(leading, "leading_chars")
        _reject_digits(trailing, "trailing_chars")

    @classmethod
    def leading(cls, chars: str | Sequence[str]) -> NegativeSignSpec:
        return cls(leading_chars=_as_chars(chars, "leading_chars"))

    @classmethod
    def trailing(cls, chars: str | Sequence[str]) -> NegativeSignSpec:
        return cls(trailing_chars=_as_chars(chars, "trailing_chars"))

    @classmethod
    def bracket(
        cls, leading: str | Sequence[str], trailing: str | Sequence[str]
    ) -> NegativeSignSpec:
        return cls(
            leading_chars=_as_chars(leading, "leading_chars"),
            trailing_chars=_as_chars(trailing, "trailing_chars"),
        )

    @property
    def position(self) -> SignPosition:
        """Where this spec's markers sit relative to the digits."""
        if self.leading_chars and self.trailing_chars:
            return SignPosition.BEFORE_AND_AFTER
        if self.leading_chars:
            return SignPosition.BEFORE
        return SignPosition.AFTER

    @property
    def is_bracket(self) -> bool:
        return self.position is SignPosition.BEFORE_AND_AFTER


@dataclass(frozen=True, slots=True)
class NegativeSignCandidateSet:
    """Ordered, non-empty collection of negative sign specs.

    Insertion order is the tie-break order: when two candidates could
    match at the same index, the earlier one wins.

    Example:
        >>> signs = NegativeSignCandidateSet.united_states()
        >>> source = RuneSource("(42)")
        >>> signs.match_leading_at(source, 0)
        (1, 1)
        >>> NegativeSignCandidateSet(())
        Traceback (most recent call last):
        ...
        numscanengine.diagnostics.errors.InvalidSpecError: ...
    """

    candidates: tuple[NegativeSignSpec, ...]

    def __post_init__(self) -> None:
        """Validate the collection.

        Raises:
            InvalidSpecError: If not iterable, empty, or holding a
                non-NegativeSignSpec item
        """
        if not isinstance(self.candidates, Iterable):
            raise InvalidSpecError(
                ErrorTemplate.spec_type_invalid(
                    "candidates", "tuple of NegativeSignSpec", self.candidates
                )
            )
        candidates = tuple(self.candidates)
        object.__setattr__(self, "candidates", candidates)
        if not candidates:
            raise InvalidSpecError(ErrorTemplate.negative_sign_set_empty())
        for candidate in candidates:
            if not isinstance(candidate, NegativeSignSpec):
                raise InvalidSpecError(
                    ErrorTemplate.spec_type_invalid("candidates", "NegativeSignSpec", candidate)
                )

    @classmethod
    def of(cls, *candidates: NegativeSignSpec) -> NegativeSignCandidateSet:
        return cls(candidates)

    @classmethod
    def leading(cls, chars: str = DEFAULT_MINUS_SIGN) -> NegativeSignCandidateSet:
        """Single leading-marker set, e.g. ``-123``."""
        return cls((NegativeSignSpec.leading(chars),))

    @classmethod
    def trailing(cls, chars: str = DEFAULT_MINUS_SIGN) -> NegativeSignCandidateSet:
        """Single trailing-marker set, e.g. ``123-``."""
        return cls((NegativeSignSpec.trailing(chars),))

    @classmethod
    def parentheses(cls) -> NegativeSignCandidateSet:
        """Single bracket set, e.g. ``(123)``."""
        return cls((NegativeSignSpec.bracket(*DEFAULT_PARENTHESES),))

    @classmethod
    def united_states(cls) -> NegativeSignCandidateSet:
        """Leading minus first, then accounting parentheses."""
        return cls(
            (
                NegativeSignSpec.leading(DEFAULT_MINUS_SIGN),
                NegativeSignSpec.bracket(*DEFAULT_PARENTHESES),
            )
        )

    def with_candidate(self, candidate: NegativeSignSpec) -> NegativeSignCandidateSet:
        """Return a new set with ``candidate`` appended (lowest precedence)."""
        return NegativeSignCandidateSet((*self.candidates, candidate))

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[NegativeSignSpec]:
        return iter(self.candidates)

    def __getitem__(self, index: int) -> NegativeSignSpec:
        return self.candidates[index]

    def match_leading_at(self, source: RuneSource, cursor: int) -> tuple[int, int] | None:
        """Find the first candidate whose leading marker starts at ``cursor``.

        Returns:
            (candidate_index, matched_length), or None. Candidates without a
            leading marker are skipped.
        """
        for index, candidate in enumerate(self.candidates):
            if candidate.leading_chars and source.starts_with_at(cursor, candidate.leading_chars):
                return index, len(candidate.leading_chars)
        return None

    def match_trailing_at(
        self,
        source: RuneSource,
        cursor: int,
        *,
        eligible: Callable[[int, NegativeSignSpec], bool] | None = None,
    ) -> tuple[int, int] | None:
        """Find the first candidate whose trailing marker starts at ``cursor``.

        Args:
            source: Text being scanned
            cursor: Index immediately after the digits consumed so far
            eligible: Optional filter on (candidate_index, candidate)

        Returns:
            (candidate_index, matched_length), or None. Candidates without a
            trailing marker are skipped.
        """
        for index, candidate in enumerate(self.candidates):
            if not candidate.trailing_chars:
                continue
            if eligible is not None and not eligible(index, candidate):
                continue
            if source.starts_with_at(cursor, candidate.trailing_chars):
                return index, len(candidate.trailing_chars)
        return None


@dataclass(frozen=True, slots=True)
class DecimalSeparatorSpec:
    """Character sequence marking the start of the fractional part.

    An empty separator disables fraction parsing.

    Example:
        >>> DecimalSeparatorSpec(",").match_at(RuneSource("1,5"), 1)
        1
        >>> DecimalSeparatorSpec().is_nop
        True
    """

    separator_chars: str = ""

    def __post_init__(self) -> None:
        chars = _as_chars(self.separator_chars, "separator_chars")
        object.__setattr__(self, "separator_chars", chars)
        _reject_digits(chars, "separator_chars")

    @classmethod
    def default(cls) -> DecimalSeparatorSpec:
        return cls(DEFAULT_DECIMAL_SEPARATOR)

    @property
    def is_nop(self) -> bool:
        return not self.separator_chars

    def match_at(self, source: RuneSource, cursor: int) -> int:
        """Return the number of characters consumed at ``cursor`` (0 if no match)."""
        if source.starts_with_at(cursor, self.separator_chars):
            return len(self.separator_chars)
        return 0


@dataclass(frozen=True, slots=True)
class TerminatorSet:
    """Ordered collection of sequences that end a scan without being consumed.

    Example:
        >>> terminators = TerminatorSet((",", ";"))
        >>> terminators.match_at(RuneSource("1;2"), 1)
        (1, 1)
        >>> TerminatorSet().is_nop
        True
    """

    terminators: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize to a tuple of str.

        Raises:
            InvalidSpecError: If not iterable, or if any terminator is empty
                or not a string
        """
        raw = (self.terminators,) if isinstance(self.terminators, str) else self.terminators
        if not isinstance(raw, Iterable):
            raise InvalidSpecError(
                ErrorTemplate.spec_type_invalid("terminators", "tuple of str", raw)
            )
        items = tuple(_as_chars(t, "terminators") for t in raw)
        object.__setattr__(self, "terminators", items)
        for index, terminator in enumerate(items):
            if not terminator:
                raise InvalidSpecError(ErrorTemplate.terminator_empty(index))

    @classmethod
    def of(cls, *terminators: str) -> TerminatorSet:
        return cls(terminators)

    @classmethod
    def from_iterable(cls, terminators: Iterable[str]) -> TerminatorSet:
        return cls(tuple(terminators))

    @property
    def is_nop(self) -> bool:
        return not self.terminators

    def __len__(self) -> int:
        return len(self.terminators)

    def __iter__(self) -> Iterator[str]:
        return iter(self.terminators)

    def match_at(self, source: RuneSource, cursor: int) -> tuple[int, int] | None:
        """Return (terminator_index, length) of the first terminator at ``cursor``."""
        for index, terminator in enumerate(self.terminators):
            if source.starts_with_at(cursor, terminator):
                return index, len(terminator)
        return None
