"""Price tag engine: pair numbers with currency tokens and rank the pairings.

Exports:
    Engine: Compiled, immutable price tag extractor
    EngineOptions: Frozen engine configuration
    PriceTagMatch: Ranked candidate pairing
    compare_matches: Partial order between candidates
    Ordering: Result of compare_matches

Python 3.13+.
"""

from .core import Engine
from .matching import Ordering, PriceTagMatch, compare_matches, rank_matches
from .options import EngineOptions

__all__ = [
    "Engine",
    "EngineOptions",
    "Ordering",
    "PriceTagMatch",
    "compare_matches",
    "rank_matches",
]
