"""Currency indicators (ISO codes and symbols) found in plain text.

One CurrencyTokenMatcher is compiled per currency. Its alternatives are the
currency's ISO codes and/or symbols, escaped as literals and ordered longest
first so that "SFr." is preferred over "Fr." at the same position.

Matching is case-insensitive by default, for ISO codes and symbols alike:
"eur", "Eur" and "EUR" all denote the Euro.

Thread-safe. Instances are immutable.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from sesters.currency import Currency
from sesters.diagnostics import CurrencyPatternError, ErrorTemplate, TextSpan

__all__ = ["CurrencyTokenMatch", "CurrencyTokenMatcher"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CurrencyTokenMatch:
    """Occurrence of a currency ISO code or symbol.

    Attributes:
        start: Start character offset of the token
        end: End character offset of the token (exclusive)
        text: Token as written in the text
        currency: Currency the token denotes
    """

    start: int
    end: int
    text: str
    currency: Currency

    @property
    def span(self) -> TextSpan:
        """Character span of the token."""
        return TextSpan(self.start, self.end)


class CurrencyTokenMatcher:
    """Recognizer for the textual indicators of one currency.

    Example:
        >>> matcher = CurrencyTokenMatcher(EUR)
        >>> [(t.start, t.text) for t in matcher.finditer("12 eur or 13€")]
        [(3, 'eur'), (12, '€')]
    """

    __slots__ = ("_alternatives", "_case_insensitive", "_currency", "_pattern")

    def __init__(
        self,
        currency: Currency,
        *,
        by_iso: bool = True,
        by_symbol: bool = True,
        case_insensitive: bool = True,
    ) -> None:
        """Compile the token pattern of a currency.

        Args:
            currency: Currency to look for
            by_iso: Match its ISO codes, like "EUR" or "USD"
            by_symbol: Match its symbols, like "€" or "$"
            case_insensitive: Ignore case when matching

        Raises:
            CurrencyPatternError: If nothing is left to match, or if the
                pattern does not compile.
        """
        alternatives: list[str] = []
        if by_iso:
            alternatives.extend(currency.isos)
        if by_symbol:
            alternatives.extend(currency.symbols)

        # Deduplicate (CHF is both an ISO code and a symbol), longest first
        unique = sorted(dict.fromkeys(alternatives), key=len, reverse=True)
        if not unique or any(not alt for alt in unique):
            raise CurrencyPatternError(
                ErrorTemplate.currency_pattern_empty(currency.main_iso), currency
            )

        flags = re.IGNORECASE if case_insensitive else 0
        try:
            pattern = re.compile("|".join(re.escape(alt) for alt in unique), flags)
        except re.error as e:
            raise CurrencyPatternError(
                ErrorTemplate.currency_pattern_invalid(currency.main_iso, str(e)), currency
            ) from e

        self._currency = currency
        self._alternatives: tuple[str, ...] = tuple(unique)
        self._case_insensitive = case_insensitive
        self._pattern = pattern
        logger.debug("Token pattern for %s: %s", currency.main_iso, pattern.pattern)

    @property
    def currency(self) -> Currency:
        """Currency this matcher looks for."""
        return self._currency

    @property
    def alternatives(self) -> tuple[str, ...]:
        """Literal tokens matched, longest first."""
        return self._alternatives

    @property
    def case_insensitive(self) -> bool:
        """Whether case is ignored."""
        return self._case_insensitive

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled recognizer."""
        return self._pattern

    def finditer(self, text: str) -> Iterator[CurrencyTokenMatch]:
        """Yield non-overlapping token occurrences, left to right."""
        for m in self._pattern.finditer(text):
            yield CurrencyTokenMatch(m.start(), m.end(), m.group(0), self._currency)

    def __repr__(self) -> str:
        return f"CurrencyTokenMatcher({self._currency.main_iso}, {self._alternatives!r})"
