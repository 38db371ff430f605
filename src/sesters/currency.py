"""Currencies known to the price tag engine.

Each currency lists the symbols and ISO 4217-ish codes it is written with in
plain text, human names, and the side of the amount its symbol conventionally
sits on. The static set below is assembled into DEFAULT_REGISTRY at import
time, before any Engine can be built.

All types are immutable, hashable, and thread-safe.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from babel import UnknownLocaleError
from babel.numbers import get_currency_name

from sesters.enums import Position
from sesters.locale_utils import get_babel_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data classes
    "Currency",
    "CurrencyRegistry",
    # Static currencies
    "BTC",
    "USD",
    "EUR",
    "GBP",
    "CHF",
    "JPY",
    "ALL_CURRENCIES",
    "DEFAULT_REGISTRY",
    # Lookup
    "lookup_by_iso",
]

logger = logging.getLogger(__name__)


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Currency:
    """A currency like US Dollar or Euro, with its textual representations.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        symbols: Symbols, like ₿, ฿ or Ƀ for Bitcoin. Never empty.
        isos: ISO 4217-ish codes, like BTC or XBT. Never empty; the first
            one is canonical.
        names: Human names. Never empty.
        position: Side of the amount the symbol is conventionally written on.
    """

    symbols: tuple[str, ...]
    isos: tuple[str, ...]
    names: tuple[str, ...]
    position: Position = Position.AFTER

    def __post_init__(self) -> None:
        """Freeze sequences into tuples and check none is empty.

        Raises:
            ValueError: If symbols, isos or names is empty.
        """
        for field_name in ("symbols", "isos", "names"):
            value: Sequence[str] = getattr(self, field_name)
            if isinstance(value, str):
                value = (value,)
            frozen = tuple(value)
            if not frozen:
                msg = f"Currency.{field_name} must not be empty"
                raise ValueError(msg)
            object.__setattr__(self, field_name, frozen)

    @property
    def main_iso(self) -> str:
        """Canonical ISO code, USD for instance."""
        return self.isos[0]

    def display_name(self, locale_code: str | None = None) -> str:
        """Human name of the currency.

        Uses the CLDR localized name when a locale is given and CLDR knows
        the canonical ISO code; otherwise the first declared name.

        Example:
            >>> EUR.display_name()
            'Euro'
            >>> EUR.display_name("de_DE")
            'Euro'
            >>> BTC.display_name("fr_FR")
            'Bitcoin'
        """
        if locale_code is None:
            return self.names[0]
        try:
            locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            logger.debug("No CLDR name for %s in '%s': %s", self.main_iso, locale_code, e)
            return self.names[0]
        if self.main_iso not in locale.currencies:
            return self.names[0]
        return get_currency_name(self.main_iso, locale=locale)

    def __str__(self) -> str:
        return self.main_iso


class CurrencyRegistry:
    """Read-only set of currencies indexed by canonical ISO code.

    Built once, then shared. Iteration follows registration order.

    Example:
        >>> registry = CurrencyRegistry([USD, EUR])
        >>> registry.lookup_by_iso("EUR") is EUR
        True
        >>> registry.lookup_by_iso("eur") is None
        True
    """

    __slots__ = ("_by_iso", "_currencies")

    def __init__(self, currencies: Iterable[Currency]) -> None:
        """Index currencies by canonical ISO code.

        Raises:
            ValueError: If two currencies share a canonical ISO code.
        """
        self._currencies: tuple[Currency, ...] = tuple(currencies)
        self._by_iso: dict[str, Currency] = {}
        for currency in self._currencies:
            if currency.main_iso in self._by_iso:
                msg = f"Currency '{currency.main_iso}' registered twice"
                raise ValueError(msg)
            self._by_iso[currency.main_iso] = currency

    @property
    def currencies(self) -> tuple[Currency, ...]:
        """Registered currencies, in registration order."""
        return self._currencies

    def lookup_by_iso(self, code: str) -> Currency | None:
        """Currency whose canonical ISO code is exactly ``code``, if any."""
        return self._by_iso.get(code)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Currency):
            return self._by_iso.get(item.main_iso) == item
        return item in self._by_iso

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def __repr__(self) -> str:
        return f"CurrencyRegistry({', '.join(self._by_iso)})"


# ============================================================================
# STATIC CURRENCIES
# ============================================================================
# Symbols and ISO codes are from Wikipedia.

# https://en.wikipedia.org/wiki/Bitcoin
BTC = Currency(
    symbols=("₿", "฿", "Ƀ"),
    isos=("BTC", "XBT"),
    names=("Bitcoin",),
    position=Position.AFTER,
)

# https://en.wikipedia.org/wiki/United_States_dollar
USD = Currency(
    symbols=("$",),
    isos=("USD",),
    names=("United States dollar",),
    position=Position.BEFORE,
)

# https://en.wikipedia.org/wiki/Euro
EUR = Currency(
    symbols=("€",),
    isos=("EUR",),
    names=("Euro",),
    position=Position.AFTER,
)

# https://en.wikipedia.org/wiki/Pound_sterling
GBP = Currency(
    symbols=("£",),
    isos=("GBP",),
    names=("Pound sterling",),
    position=Position.BEFORE,
)

# https://en.wikipedia.org/wiki/Swiss_franc
CHF = Currency(
    symbols=("CHF", "Fr.", "SFr.", "Fr.sv.", "₣"),
    isos=("CHF",),
    names=("Swiss Franc",),
    position=Position.BEFORE,
)

# https://en.wikipedia.org/wiki/Japanese_yen
JPY = Currency(
    symbols=("¥", "円", "圓"),
    isos=("JPY",),
    names=("Yen",),
    position=Position.BEFORE,
)

ALL_CURRENCIES: tuple[Currency, ...] = (BTC, USD, EUR, GBP, CHF, JPY)

DEFAULT_REGISTRY: CurrencyRegistry = CurrencyRegistry(ALL_CURRENCIES)


def lookup_by_iso(code: str) -> Currency | None:
    """Get a registered currency from its canonical ISO code.

    Lookup is case-exact; upper-case user input before calling.

    Example:
        >>> lookup_by_iso("USD") is USD
        True
        >>> lookup_by_iso("___") is None
        True
    """
    return DEFAULT_REGISTRY.lookup_by_iso(code)
