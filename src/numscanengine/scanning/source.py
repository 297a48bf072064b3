"""Immutable character buffer with a bounded search window.

Python 3.11+. Zero external dependencies.

Design Philosophy:
    - RuneSource is immutable (frozen dataclass)
    - The window is resolved once, at construction
    - Out-of-range reads are programming errors (IndexError), never
      diagnostics: the scanner only asks for indexes inside the window

Characters are Python ``str`` code points. A ``str`` is already an
immutable, indexable character sequence, so no separate rune array type
is needed.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from numscanengine.constants import SEARCH_TO_END
from numscanengine.diagnostics import ErrorTemplate, InvalidRangeError

__all__ = ["RuneSource", "resolve_window"]


def resolve_window(length: int, start_index: int, requested_length: int) -> tuple[int, int]:
    """Clamp a requested search window to a buffer of ``length`` characters.

    Args:
        length: Total number of characters in the buffer
        start_index: First index to search
        requested_length: Characters to search; negative means "to end"

    Returns:
        (effective_start, effective_length)

    Raises:
        InvalidRangeError: If start_index < 0 or start_index > length

    Example:
        >>> resolve_window(10, 2, -1)
        (2, 8)
        >>> resolve_window(10, 2, 50)
        (2, 8)
        >>> resolve_window(10, 10, 3)
        (10, 0)
    """
    if start_index < 0:
        raise InvalidRangeError(ErrorTemplate.start_index_negative(start_index))
    if start_index > length:
        raise InvalidRangeError(ErrorTemplate.start_index_out_of_range(start_index, length))
    remaining = length - start_index
    if requested_length < 0:
        return start_index, remaining
    return start_index, min(requested_length, remaining)


@dataclass(frozen=True, slots=True)
class RuneSource:
    """Immutable text plus the window the scanner may read.

    Example:
        >>> source = RuneSource("Balance: -123.45 USD", start_index=9)
        >>> source.window_end
        20
        >>> source.char_at(9)
        '-'
        >>> source.starts_with_at(9, "-1")
        True
        >>> RuneSource("abc", start_index=4)
        Traceback (most recent call last):
        ...
        numscanengine.diagnostics.errors.InvalidRangeError: error[START_INDEX_OUT_OF_RANGE]: ...
    """

    characters: str
    start_index: int = 0
    search_length: int = SEARCH_TO_END
    adjusted_search_length: int = field(init=False)

    def __post_init__(self) -> None:
        """Resolve and store the clamped search window.

        Raises:
            InvalidRangeError: If an argument has the wrong type or
                start_index lies outside the text
        """
        if not isinstance(self.characters, str):
            raise InvalidRangeError(
                ErrorTemplate.source_argument_invalid("characters", "str", self.characters)
            )
        for name in ("start_index", "search_length"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful index
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRangeError(ErrorTemplate.source_argument_invalid(name, "int", value))

        _, effective_length = resolve_window(
            len(self.characters), self.start_index, self.search_length
        )
        object.__setattr__(self, "adjusted_search_length", effective_length)

    @classmethod
    def from_chars(
        cls,
        chars: Sequence[str],
        start_index: int = 0,
        search_length: int = SEARCH_TO_END,
    ) -> "RuneSource":
        """Build a source from a sequence of single characters (e.g. a list)."""
        return cls("".join(chars), start_index, search_length)

    def __len__(self) -> int:
        return len(self.characters)

    @property
    def window_end(self) -> int:
        """Index one past the last character the scanner may read."""
        return self.start_index + self.adjusted_search_length

    @property
    def is_window_empty(self) -> bool:
        return self.adjusted_search_length == 0

    @property
    def is_truncated(self) -> bool:
        """True when the window stops before the end of the text."""
        return self.window_end < len(self.characters)

    def char_at(self, index: int) -> str:
        """Return the character at ``index``.

        Raises:
            IndexError: If index is outside the text
        """
        if not 0 <= index < len(self.characters):
            msg = f"RuneSource index {index} out of range for length {len(self.characters)}"
            raise IndexError(msg)
        return self.characters[index]

    def slice_from(self, index: int) -> str:
        """Return the text from ``index`` to the end of the buffer (not the window).

        Raises:
            IndexError: If index is outside [0, len]
        """
        if not 0 <= index <= len(self.characters):
            msg = f"RuneSource slice start {index} out of range for length {len(self.characters)}"
            raise IndexError(msg)
        return self.characters[index:]

    def starts_with_at(self, index: int, chars: str) -> bool:
        """Check whether ``chars`` occurs at ``index`` entirely inside the window.

        An empty ``chars`` never matches.
        """
        if not chars:
            return False
        end = index + len(chars)
        if end > self.window_end:
            return False
        return self.characters.startswith(chars, index)
