"""Enumerations for Sesters type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class Position(StrEnum):
    """Where a currency conventionally sits relative to its amount.

    StrEnum provides automatic string conversion: str(Position.BEFORE) == "before"
    """

    BEFORE = "before"
    """Symbol precedes the amount: $12"""

    AFTER = "after"
    """Symbol follows the amount: 12 €"""


__all__ = [
    "Position",
]
