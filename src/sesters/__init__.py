"""Sesters - find price tags in plain text and convert them.

Scans free-form text for amounts ("12,50", "-20 000.02") and currency
indicators ("EUR", "€", "usd"), pairs them by distance, ranks ambiguous
pairings, and converts the resulting price tags with caller-supplied rates.

Public API:
    Engine - Compiled price tag extractor (all_price_tags, top_price_tags)
    EngineOptions - Frozen engine configuration
    PriceTag - Currency + amount, convertible with a Rate
    Rate - Exchange rate from a source to a destination currency
    Currency, Position, CurrencyRegistry, lookup_by_iso - Currency registry
    NumberFormat, COMMON, US, FR - Amount recognizers
    convert_text, Conversion - Conversion of price tags found in text

Exceptions:
    SestersError - Base exception class
    ConfigurationError - Invalid format, currency pattern or engine options
    ConversionError - Rate does not apply to the price tag

Submodules:
    sesters.parsing - Number formats and currency token matchers
    sesters.engine - Engine, options and candidate ranking
    sesters.diagnostics - Error types, codes and formatting
"""

from .conversion import Conversion, convert_text
from .currency import (
    ALL_CURRENCIES,
    BTC,
    CHF,
    DEFAULT_REGISTRY,
    EUR,
    GBP,
    JPY,
    USD,
    Currency,
    CurrencyRegistry,
    lookup_by_iso,
)
from .diagnostics import (
    ConfigurationError,
    ConversionError,
    CurrencyPatternError,
    EngineConfigError,
    NumberFormatConfigError,
    SestersError,
)
from .engine import Engine, EngineOptions
from .enums import Position
from .parsing import COMMON, FR, US, NumberFormat
from .price_tag import PriceTag
from .rate import Rate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("sesters")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ALL_CURRENCIES",
    "BTC",
    "CHF",
    "COMMON",
    "DEFAULT_REGISTRY",
    "EUR",
    "FR",
    "GBP",
    "JPY",
    "US",
    "USD",
    "ConfigurationError",
    "Conversion",
    "ConversionError",
    "Currency",
    "CurrencyPatternError",
    "CurrencyRegistry",
    "Engine",
    "EngineConfigError",
    "EngineOptions",
    "NumberFormat",
    "NumberFormatConfigError",
    "Position",
    "PriceTag",
    "Rate",
    "SestersError",
    "__version__",
    "convert_text",
    "lookup_by_iso",
]
