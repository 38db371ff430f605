"""Sesters exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from sesters.currency import Currency
    from sesters.price_tag import PriceTag
    from sesters.rate import Rate

__all__ = [
    "ConfigurationError",
    "ConversionError",
    "CurrencyPatternError",
    "EngineConfigError",
    "NumberFormatConfigError",
    "SestersError",
]


class SestersError(Exception):
    """Base exception for all Sesters errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SestersError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(SestersError):
    """Invalid configuration detected while building a matcher or engine.

    Raised at construction time only. Once a NumberFormat, matcher or Engine
    exists, scanning text never raises.
    """


class NumberFormatConfigError(ConfigurationError):
    """Invalid separator sets, or a locale without CLDR number symbols."""


class CurrencyPatternError(ConfigurationError):
    """Token pattern for a currency cannot be built.

    Attributes:
        currency: The currency whose pattern failed
    """

    def __init__(self, message: str | Diagnostic, currency: Currency) -> None:
        """Initialize CurrencyPatternError.

        Args:
            message: Error message string OR Diagnostic object
            currency: The currency whose pattern failed
        """
        super().__init__(message)
        self.currency = currency


class EngineConfigError(ConfigurationError):
    """Inconsistent engine options (window, currencies, match modes)."""


class ConversionError(SestersError):
    """Price tag cannot be converted with the given rate.

    Raised when the rate's source currency differs from the price tag's
    currency. A rate is never substituted silently.

    Attributes:
        rate: The rate that was offered
        price_tag: The price tag that was to be converted

    Example:
        >>> try:
        ...     PriceTag(EUR, 10.0).convert(usd_to_gbp)
        ... except ConversionError as e:
        ...     print(e.price_tag, e.rate.src)
        EUR 10.00 USD
    """

    def __init__(self, message: str | Diagnostic, *, rate: Rate, price_tag: PriceTag) -> None:
        """Initialize ConversionError.

        Args:
            message: Error message string OR Diagnostic object
            rate: The rate that was offered
            price_tag: The price tag that was to be converted
        """
        super().__init__(message)
        self.rate = rate
        self.price_tag = price_tag
