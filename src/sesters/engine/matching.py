"""Candidate pairings of a number and a currency token, and how they rank.

A PriceTagMatch is better than another if the distance between amount and
token is shorter. When distances are equal, the match whose token sits on the
side of the amount expected for its currency is better.

With this ordering the best match is the smallest: a distance of 0 with the
expected order is the minimum of any set of matches.

Two matches with the same distance and the same order correctness but a
different amount or currency are two equally plausible readings of the text.
They are incomparable, not equal, so the relation is only a partial order.
Sorting uses the total key ``(distance, not correct_symbol_order)``, which is
compatible with it, and a stable sort keeps such readings in discovery order.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from sesters.currency import Currency
from sesters.price_tag import PriceTag

__all__ = [
    "Ordering",
    "PriceTagMatch",
    "compare_matches",
    "rank_matches",
]


class Ordering(IntEnum):
    """Outcome of comparing two comparable matches."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, slots=True)
class PriceTagMatch:
    """Information about a price tag match, used to rank associations.

    Equality compares every field, consistent with compare_matches.

    Attributes:
        amount: Amount of the currency
        currency: Currency matching
        distance: Character distance between token and amount
        correct_symbol_order: Whether the side of the token relative to the
            amount is the one expected for the currency
    """

    amount: float
    currency: Currency
    distance: int
    correct_symbol_order: bool

    @property
    def rank_key(self) -> tuple[int, bool]:
        """Total sort key compatible with compare_matches (smaller is better)."""
        return (self.distance, not self.correct_symbol_order)

    def to_price_tag(self) -> PriceTag:
        """Drop ranking information."""
        return PriceTag(self.currency, self.amount)

    def __lt__(self, other: PriceTagMatch) -> bool:
        return compare_matches(self, other) is Ordering.LESS

    def __le__(self, other: PriceTagMatch) -> bool:
        return compare_matches(self, other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: PriceTagMatch) -> bool:
        return compare_matches(self, other) is Ordering.GREATER

    def __ge__(self, other: PriceTagMatch) -> bool:
        return compare_matches(self, other) in (Ordering.GREATER, Ordering.EQUAL)


def compare_matches(a: PriceTagMatch, b: PriceTagMatch) -> Ordering | None:
    """Compare two matches; None when they are incomparable.

    Example:
        >>> near = PriceTagMatch(12.0, EUR, 0, True)
        >>> far = PriceTagMatch(12.0, USD, 1, True)
        >>> compare_matches(near, far)
        <Ordering.LESS: -1>
        >>> compare_matches(near, PriceTagMatch(12.0, USD, 0, True)) is None
        True
    """
    if a.distance != b.distance:
        return Ordering.LESS if a.distance < b.distance else Ordering.GREATER
    if a.correct_symbol_order != b.correct_symbol_order:
        return Ordering.LESS if a.correct_symbol_order else Ordering.GREATER
    return Ordering.EQUAL if a == b else None


def rank_matches(matches: Iterable[PriceTagMatch]) -> list[PriceTagMatch]:
    """Matches sorted best first; incomparable ones keep their input order."""
    return sorted(matches, key=lambda m: m.rank_key)
