"""Exchange rates from a source currency to a destination currency.

Rates are produced by the caller (an API client, a cache, a fixed table) and
consumed by PriceTag.convert and sesters.conversion. Nothing in this package
fetches or stores them.

Python 3.13+.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from sesters.constants import PARITY_PROVIDER, RATE_DISPLAY_DECIMAL_PLACES
from sesters.currency import Currency

__all__ = ["Rate"]


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Rate:
    """Rate from a source currency to a destination currency.

    Attributes:
        src: Source currency
        dst: Destination currency
        value: Amount of ``dst`` worth one unit of ``src``
        provider: Service which provided the rate
        date: When the rate was obtained
        cache_until: Expiry of the rate; None if it must not be cached

    Example:
        >>> rate = Rate(USD, EUR, 0.92, date=datetime(2024, 1, 1, tzinfo=UTC))
        >>> str(rate)
        '1 USD ≈ 0.920 EUR (2024-01-01 00:00:00+00:00)'
    """

    src: Currency
    dst: Currency
    value: float
    provider: str = ""
    date: datetime = field(default_factory=_utc_now)
    cache_until: datetime | None = None

    def __post_init__(self) -> None:
        """Validate the rate value.

        Raises:
            ValueError: If value is not a finite positive number.
        """
        if not math.isfinite(self.value) or self.value <= 0:
            msg = f"Rate value must be finite and positive, got {self.value}"
            raise ValueError(msg)

    @classmethod
    def now(
        cls,
        src: Currency,
        dst: Currency,
        value: float,
        provider: str,
        cache_for: timedelta | None = None,
    ) -> Rate:
        """Rate obtained now, optionally cacheable for ``cache_for``."""
        date = _utc_now()
        cache_until = date + cache_for if cache_for is not None else None
        return cls(src, dst, value, provider, date, cache_until)

    @classmethod
    def parity(cls, currency: Currency) -> Rate:
        """A 1:1 rate between a currency and itself."""
        return cls(currency, currency, 1.0, PARITY_PROVIDER)

    def is_fresh(self, at: datetime | None = None) -> bool:
        """Whether the rate may still be served from a cache at ``at`` (default: now)."""
        if self.cache_until is None:
            return False
        return (at or _utc_now()) < self.cache_until

    def inverse(self) -> Rate:
        """Rate in the opposite direction, same provenance."""
        return Rate(self.dst, self.src, 1.0 / self.value, self.provider, self.date, self.cache_until)

    def __str__(self) -> str:
        return (
            f"1 {self.src} ≈ {self.value:.{RATE_DISPLAY_DECIMAL_PLACES}f} {self.dst} "
            f"({self.date})"
        )
