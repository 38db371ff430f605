"""Engine configuration.

Provides a single frozen dataclass encapsulating every knob of the price tag
engine. Validated at construction time, so an Engine never starts from an
inconsistent configuration.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from sesters.constants import DEFAULT_WINDOW_SIZE
from sesters.currency import ALL_CURRENCIES, Currency
from sesters.diagnostics import EngineConfigError, ErrorTemplate
from sesters.parsing import COMMON, NumberFormat

__all__ = ["EngineOptions"]


@dataclass(frozen=True, slots=True)
class EngineOptions:
    """Immutable configuration for Engine.

    All fields have defaults; ``EngineOptions()`` looks for every registered
    currency, by ISO code and by symbol, ignoring case, with the common
    number format and a 10 character window.

    Attributes:
        window_size: Maximum character distance between a currency token and
            a number (default: 10). Both bounds of the window are inclusive.
        currencies: Currencies to look for (default: all registered).
        match_by_symbol: Look for symbols like "€" or "$" (default: True).
        match_by_iso: Look for ISO codes like "EUR" or "USD" (default: True).
        number_format: Format of the amounts (default: COMMON).
        case_insensitive: Ignore case of tokens (default: True).

    Example:
        >>> options = EngineOptions(currencies=(EUR, USD), window_size=3)
        >>> options.replace(number_format=US).number_format.name
        'us'
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    currencies: tuple[Currency, ...] = ALL_CURRENCIES
    match_by_symbol: bool = True
    match_by_iso: bool = True
    number_format: NumberFormat = COMMON
    case_insensitive: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            EngineConfigError: If window_size is negative, no currency is
                given, a canonical ISO code is repeated, or both match
                modes are disabled.
        """
        currencies: Iterable[Currency] = self.currencies
        if isinstance(currencies, Currency):
            currencies = (currencies,)
        object.__setattr__(self, "currencies", tuple(currencies))

        if self.window_size < 0:
            raise EngineConfigError(ErrorTemplate.window_size_invalid(self.window_size))
        if not self.currencies:
            raise EngineConfigError(ErrorTemplate.currencies_empty())
        if not (self.match_by_iso or self.match_by_symbol):
            raise EngineConfigError(ErrorTemplate.match_mode_empty())

        seen: set[str] = set()
        for currency in self.currencies:
            if currency.main_iso in seen:
                raise EngineConfigError(ErrorTemplate.currency_duplicate(currency.main_iso))
            seen.add(currency.main_iso)

    def replace(self, **changes: Any) -> EngineOptions:
        """Copy with some fields changed (validated again)."""
        return dataclasses.replace(self, **changes)
