"""Scan specs derived from CLDR locale data.

The scanning engine never looks at locale names; it consumes pre-built
specs. This module builds those specs once per locale from Babel's CLDR
data and caches them:

    - Decimal separator: babel.numbers.get_decimal_symbol()
    - Leading minus: babel.numbers.get_minus_sign_symbol(), plus ASCII "-"
      as a lower-precedence fallback when the locale uses another glyph
      (e.g. U+2212 MINUS SIGN)
    - Parentheses: added when the locale's accounting currency pattern
      brackets negative amounts
    - Terminators: none by default

Babel Dependency:
    Import is deferred to call time so engine-only installations keep
    working. BabelImportError is raised when Babel is missing.

Thread-safe. Results are cached with functools.lru_cache.

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from numscanengine.constants import (
    DEFAULT_MINUS_SIGN,
    DEFAULT_PARENTHESES,
    MAX_LOCALE_CACHE_SIZE,
)
from numscanengine.core.babel_compat import (
    get_babel_numbers,
    get_unknown_locale_error,
    require_babel,
)
from numscanengine.diagnostics import ErrorTemplate, InvalidSpecError
from numscanengine.locale_utils import get_babel_locale, normalize_locale
from numscanengine.scanning import (
    DecimalSeparatorSpec,
    NegativeSignCandidateSet,
    NegativeSignSpec,
    ScanEngine,
    TerminatorSet,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["NumberSymbols"]

logger = logging.getLogger(__name__)

_BIDI_MARKS = frozenset("\u200e\u200f\u061c")


@dataclass(frozen=True, slots=True)
class NumberSymbols:
    """The three scan specs for one number convention.

    Attributes:
        negative_signs: Negative sign candidates in precedence order
        decimal_separator: Fraction boundary
        terminators: Sequences that stop a scan
        locale_code: POSIX locale the symbols came from (None for hand-built)

    Example:
        >>> symbols = NumberSymbols.default()
        >>> symbols.engine().scan("(42.50)")[1].text
        '-42.50'
    """

    negative_signs: NegativeSignCandidateSet
    decimal_separator: DecimalSeparatorSpec = field(default_factory=DecimalSeparatorSpec.default)
    terminators: TerminatorSet = field(default_factory=TerminatorSet)
    locale_code: str | None = None

    @classmethod
    def default(cls) -> NumberSymbols:
        """Locale-free United States convention: '-' or '(...)', '.' separator."""
        return cls(
            negative_signs=NegativeSignCandidateSet.united_states(),
            decimal_separator=DecimalSeparatorSpec.default(),
        )

    @classmethod
    def from_locale(
        cls, locale_code: str, *, terminators: Iterable[str] = ()
    ) -> NumberSymbols:
        """Derive symbols from CLDR data for ``locale_code``.

        Args:
            locale_code: BCP-47 or POSIX locale code
            terminators: Optional terminators to attach

        Returns:
            NumberSymbols for the locale

        Raises:
            BabelImportError: If Babel is not installed
            InvalidSpecError: If the locale is unknown
        """
        require_babel("NumberSymbols.from_locale")
        base = _symbols_for_locale(normalize_locale(locale_code))
        extra = TerminatorSet.from_iterable(terminators)
        if extra.is_nop:
            return base
        return cls(base.negative_signs, base.decimal_separator, extra, base.locale_code)

    def with_terminators(self, *terminators: str) -> NumberSymbols:
        return NumberSymbols(
            self.negative_signs,
            self.decimal_separator,
            TerminatorSet(terminators),
            self.locale_code,
        )

    def engine(self) -> ScanEngine:
        return ScanEngine(self.negative_signs, self.decimal_separator, self.terminators)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _symbols_for_locale(locale_code: str) -> NumberSymbols:
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError, TypeError) as e:
        raise InvalidSpecError(ErrorTemplate.locale_unknown(locale_code, str(e))) from e

    numbers = get_babel_numbers()
    decimal_symbol = numbers.get_decimal_symbol(locale)
    minus_symbol = numbers.get_minus_sign_symbol(locale)

    # Some locales wrap the minus sign in bidi marks (U+200E, U+200F, U+061C).
    minus_symbol = "".join(c for c in minus_symbol if c not in _BIDI_MARKS) or (
        DEFAULT_MINUS_SIGN
    )

    candidates = [NegativeSignSpec.leading(minus_symbol)]
    if minus_symbol != DEFAULT_MINUS_SIGN:
        candidates.append(NegativeSignSpec.leading(DEFAULT_MINUS_SIGN))

    uses_parentheses = _accounting_uses_parentheses(locale)
    if uses_parentheses:
        candidates.append(NegativeSignSpec.bracket(*DEFAULT_PARENTHESES))

    logger.debug(
        "Derived number symbols for %s: decimal=%r minus=%r parentheses=%s",
        locale_code,
        decimal_symbol,
        minus_symbol,
        uses_parentheses,
    )
    return NumberSymbols(
        negative_signs=NegativeSignCandidateSet(tuple(candidates)),
        decimal_separator=DecimalSeparatorSpec(decimal_symbol),
        locale_code=locale_code,
    )


def _accounting_uses_parentheses(locale: Locale) -> bool:
    accounting = locale.currency_formats.get("accounting")
    if accounting is None:
        logger.warning("Locale %s has no accounting currency pattern", locale)
        return False
    return "(" in accounting.pattern
