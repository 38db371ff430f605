"""Price tag engine, used to extract price tags from plain text.

It proceeds in 3 steps:
1. Find the positions of all numbers, with the configured number format.
2. Find the positions of the currency tokens looked for and, for each one,
   look for numbers backward and forward within a window. Every number found
   becomes a candidate PriceTagMatch.
3. Rank the candidates and return the N topmost, or all of them.

Looking backward, the window is checked against the END of numbers; looking
forward, against their START. Checking starts only would miss a long amount
written right before its token:

        window_size
      /-------------\\
    1 333 333 333  USD

Both window bounds are inclusive. Offsets are character offsets.

Thread Safety:
    An Engine is immutable once built: compiled patterns and options are
    shared read-only, and every call works on local state only.

Python 3.13+.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator
from typing import Any

from sesters.enums import Position
from sesters.parsing import CurrencyTokenMatcher, NumberMatch
from sesters.price_tag import PriceTag

from .matching import PriceTagMatch, rank_matches
from .options import EngineOptions

__all__ = ["Engine"]

logger = logging.getLogger(__name__)


class _PositionIndex:
    """Number values keyed by a character offset, with inclusive range queries."""

    __slots__ = ("_positions", "_values")

    def __init__(self, items: list[tuple[int, float]]) -> None:
        items.sort(key=lambda item: item[0])
        self._positions = [position for position, _ in items]
        self._values = [value for _, value in items]

    def range(self, low: int, high: int) -> Iterator[tuple[int, float]]:
        """Yield (position, value) for low <= position <= high."""
        first = bisect.bisect_left(self._positions, low)
        last = bisect.bisect_right(self._positions, high)
        for i in range(first, last):
            yield self._positions[i], self._values[i]

    def __len__(self) -> int:
        return len(self._positions)


class Engine:
    """Extracts price tags from plain text.

    Example:
        >>> engine = Engine.build(currencies=(USD, EUR))
        >>> [str(tag) for tag in engine.all_price_tags("USD 13.5")]
        ['USD 13.50']
        >>> sorted(str(tag) for tag in engine.all_price_tags("$ 12 €"))
        ['EUR 12.00', 'USD 12.00']
        >>> engine.all_price_tags("13")
        []
    """

    __slots__ = ("_matchers", "_options")

    def __init__(self, options: EngineOptions | None = None, **overrides: Any) -> None:
        """Build an engine and compile its matchers eagerly.

        Args:
            options: Engine configuration (default: EngineOptions())
            **overrides: EngineOptions fields replacing those of ``options``

        Raises:
            ConfigurationError: If options are inconsistent or a currency
                token pattern cannot be built.
        """
        if options is None:
            options = EngineOptions(**overrides)
        elif overrides:
            options = options.replace(**overrides)

        self._options = options
        self._matchers: tuple[CurrencyTokenMatcher, ...] = tuple(
            CurrencyTokenMatcher(
                currency,
                by_iso=options.match_by_iso,
                by_symbol=options.match_by_symbol,
                case_insensitive=options.case_insensitive,
            )
            for currency in options.currencies
        )
        logger.debug(
            "Engine built: %d currencies, window %d, format %s",
            len(self._matchers),
            options.window_size,
            options.number_format.name,
        )

    @classmethod
    def build(cls, options: EngineOptions | None = None, **overrides: Any) -> Engine:
        """Build an engine; see __init__."""
        return cls(options, **overrides)

    @property
    def options(self) -> EngineOptions:
        """Configuration the engine was built with."""
        return self._options

    @property
    def matchers(self) -> tuple[CurrencyTokenMatcher, ...]:
        """Compiled token matchers, one per configured currency."""
        return self._matchers

    def _number_indexes(self, text: str) -> tuple[_PositionIndex, _PositionIndex]:
        numbers: list[NumberMatch] = self._options.number_format.find_all(text)
        by_start = _PositionIndex([(n.start, n.value) for n in numbers])
        by_end = _PositionIndex([(n.end, n.value) for n in numbers])
        logger.debug("%d numbers found", len(numbers))
        return by_start, by_end

    def find(self, text: str) -> list[PriceTagMatch]:
        """Return all price tag matches found in text, best first."""
        if not text:
            return []

        by_start, by_end = self._number_indexes(text)
        if not by_start:
            return []

        window = self._options.window_size
        candidates: list[PriceTagMatch] = []
        for matcher in self._matchers:
            currency = matcher.currency
            for token in matcher.finditer(text):
                # Backward: the amount ends before the token
                for location, value in by_end.range(max(0, token.start - window), token.start):
                    candidates.append(
                        PriceTagMatch(
                            value,
                            currency,
                            token.start - location,
                            currency.position is Position.BEFORE,
                        )
                    )
                # Forward: the amount starts after the token
                for location, value in by_start.range(token.end, token.end + window):
                    candidates.append(
                        PriceTagMatch(
                            value,
                            currency,
                            location - token.end,
                            currency.position is Position.AFTER,
                        )
                    )

        logger.debug("%d price tag candidates", len(candidates))
        return rank_matches(candidates)

    def all_price_tags(self, text: str) -> list[PriceTag]:
        """Return all price tags found in text, best first."""
        return [m.to_price_tag() for m in self.find(text)]

    def top_price_tags(self, n: int, text: str) -> list[PriceTag]:
        """Return the ``n`` best price tags found in text.

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            msg = f"n must be >= 0, got {n}"
            raise ValueError(msg)
        return [m.to_price_tag() for m in self.find(text)[:n]]

    def best_price_tag(self, text: str) -> PriceTag | None:
        """Return the best price tag found in text, if any."""
        matches = self.find(text)
        return matches[0].to_price_tag() if matches else None

    def __repr__(self) -> str:
        isos = ", ".join(m.currency.main_iso for m in self._matchers)
        return f"Engine({isos}; window={self._options.window_size})"
