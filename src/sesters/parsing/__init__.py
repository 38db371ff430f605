"""Text scanning primitives: numbers and currency tokens.

Public API:
    Number formats:
        NumberFormat - Recognizer configured by thousand/decimal separator sets
        NumberMatch - Number found in text (span + value)
        COMMON, US, FR - Named formats

    Currency tokens:
        CurrencyTokenMatcher - Recognizer for one currency's ISO codes/symbols
        CurrencyTokenMatch - Token found in text (span + currency)

Both recognizers are compiled at construction time and raise
ConfigurationError subclasses there; scanning text never raises.

Example:
    >>> from sesters.parsing import COMMON, CurrencyTokenMatcher
    >>> from sesters.currency import EUR
    >>> [m.value for m in COMMON.finditer("EUR 15")]
    [15.0]
    >>> [t.start for t in CurrencyTokenMatcher(EUR).finditer("EUR 15")]
    [0]

Python 3.13+.
"""

from .numbers import COMMON, FR, US, NumberFormat, NumberMatch
from .tokens import CurrencyTokenMatch, CurrencyTokenMatcher

__all__ = [
    "COMMON",
    "FR",
    "US",
    "CurrencyTokenMatch",
    "CurrencyTokenMatcher",
    "NumberFormat",
    "NumberMatch",
]
