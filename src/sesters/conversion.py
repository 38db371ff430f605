"""Convert price tags found in text to preferred currencies.

Rates come from a caller-supplied RateSource: any callable taking a source
and a destination currency and returning a Rate, or None when no rate is
available. A network client, a database cache or a fixed table all fit; this
module never performs I/O itself.

Example:
    >>> table = {("USD", "EUR"): 0.92}
    >>> def rates(src, dst):
    ...     value = table.get((src.main_iso, dst.main_iso))
    ...     return Rate(src, dst, value) if value else None
    >>> [str(c) for c in convert_text(Engine(), "USD 12", [EUR, USD], rates)]
    ['USD 12.00 ➜ EUR 11.04']

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from sesters.constants import CONVERSION_ARROW
from sesters.currency import DEFAULT_REGISTRY, Currency, CurrencyRegistry
from sesters.engine import Engine
from sesters.price_tag import PriceTag
from sesters.rate import Rate

__all__ = [
    "Conversion",
    "RateSource",
    "convert_price_tag",
    "convert_text",
    "resolve_destinations",
]

logger = logging.getLogger(__name__)

type RateSource = Callable[[Currency, Currency], Rate | None]
"""Callable returning the rate from a source to a destination currency, if known."""


@dataclass(frozen=True, slots=True)
class Conversion:
    """A price tag, its converted value, and the rate used.

    Attributes:
        source: Price tag found in text
        result: Price tag in the destination currency
        rate: Rate applied
    """

    source: PriceTag
    result: PriceTag
    rate: Rate

    def __str__(self) -> str:
        return f"{self.source} {CONVERSION_ARROW} {self.result}"


def resolve_destinations(
    codes: Iterable[str],
    registry: CurrencyRegistry = DEFAULT_REGISTRY,
) -> tuple[Currency, ...]:
    """Currencies for user-provided ISO codes, ignoring unknown ones.

    Codes are upper-cased before lookup. Unknown codes are logged and dropped;
    duplicates are kept once, in first-seen order.

    Example:
        >>> [c.main_iso for c in resolve_destinations(["eur", "XXX", "usd"])]
        ['EUR', 'USD']
    """
    resolved: dict[str, Currency] = {}
    for code in codes:
        currency = registry.lookup_by_iso(code.strip().upper())
        if currency is None:
            logger.warning("Invalid currency iso symbol '%s', ignored", code)
            continue
        resolved.setdefault(currency.main_iso, currency)
    return tuple(resolved.values())


def convert_price_tag(
    price_tag: PriceTag,
    destinations: Iterable[Currency],
    rate_source: RateSource,
) -> tuple[Conversion, ...]:
    """Convert one price tag to each destination currency.

    Conversions that would not change currency (1 BTC -> 1 BTC) are skipped,
    and so are destinations for which the rate source has no rate.

    Raises:
        ConversionError: If the rate source returns a rate whose source
            currency is not the price tag's currency
    """
    conversions: list[Conversion] = []
    for dst in destinations:
        if dst == price_tag.currency:
            continue
        rate = rate_source(price_tag.currency, dst)
        if rate is None:
            logger.warning("No rate retrieved for %s -> %s", price_tag.currency, dst)
            continue
        logger.info("Rate retrieved: %s", rate)
        conversions.append(Conversion(price_tag, price_tag.convert(rate), rate))
    return tuple(conversions)


def convert_text(
    engine: Engine,
    text: str,
    destinations: Iterable[Currency],
    rate_source: RateSource,
    *,
    limit: int = 1,
) -> tuple[Conversion, ...]:
    """Find price tags in text and convert the ``limit`` best ones.

    Returns an empty tuple when no price tag is found.

    Raises:
        ValueError: If limit is negative
        ConversionError: See convert_price_tag
    """
    price_tags = engine.top_price_tags(limit, text)
    if not price_tags:
        logger.info("No currency found.")
        return ()

    destinations = tuple(destinations)
    conversions: list[Conversion] = []
    for price_tag in price_tags:
        conversions.extend(convert_price_tag(price_tag, destinations, rate_source))
    return tuple(conversions)
