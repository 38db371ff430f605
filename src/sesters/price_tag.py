"""Price tag: a currency associated with an amount.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel.numbers import format_currency

from sesters.constants import DISPLAY_DECIMAL_PLACES
from sesters.currency import Currency
from sesters.diagnostics import ConversionError, ErrorTemplate
from sesters.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from sesters.rate import Rate

__all__ = ["PriceTag"]


@dataclass(frozen=True, slots=True)
class PriceTag:
    """Amount of a currency, as found in text or obtained by conversion.

    Immutable, thread-safe, hashable.

    Attributes:
        currency: Currency of the amount
        amount: The amount

    Example:
        >>> tag = PriceTag(USD, 12.0)
        >>> str(tag)
        'USD 12.00'
        >>> str(tag.convert(Rate(USD, EUR, 0.92)))
        'EUR 11.04'
    """

    currency: Currency
    amount: float

    def convert(self, rate: Rate) -> PriceTag:
        """Convert to the rate's destination currency.

        Args:
            rate: Rate whose source currency is this price tag's currency

        Returns:
            New price tag in ``rate.dst`` worth ``amount * rate.value``

        Raises:
            ConversionError: If ``rate.src`` is not this price tag's currency
        """
        if rate.src != self.currency:
            diagnostic = ErrorTemplate.conversion_currency_mismatch(
                str(self), rate.src.main_iso, rate.dst.main_iso
            )
            raise ConversionError(diagnostic, rate=rate, price_tag=self)
        return PriceTag(rate.dst, self.amount * rate.value)

    def format(self, locale_code: str) -> str:
        """Locale-aware rendering through CLDR currency patterns.

        Currencies unknown to CLDR (BTC) are rendered with their ISO code.

        Raises:
            babel.core.UnknownLocaleError: If locale is not recognized

        Example:
            >>> PriceTag(EUR, 1234.5).format("de_DE")
            '1.234,50\\xa0€'
        """
        return format_currency(
            self.amount, self.currency.main_iso, locale=get_babel_locale(locale_code)
        )

    def __str__(self) -> str:
        return f"{self.currency.main_iso} {self.amount:.{DISPLAY_DECIMAL_PLACES}f}"
