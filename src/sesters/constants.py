"""Shared constants for Sesters.

This module provides centralized configuration constants used across the
parsing, engine and conversion packages. Placing constants here avoids
circular imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Matching
    "DEFAULT_WINDOW_SIZE",
    # Display
    "DISPLAY_DECIMAL_PLACES",
    "RATE_DISPLAY_DECIMAL_PLACES",
    "CONVERSION_ARROW",
    # Providers
    "PARITY_PROVIDER",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# MATCHING
# ============================================================================

# Maximum character distance between a currency token and a number for the
# two to be paired. Both window bounds are inclusive.
DEFAULT_WINDOW_SIZE: int = 10

# ============================================================================
# DISPLAY
# ============================================================================

# Price tags render their amount with a fixed number of decimals ("EUR 15.00").
DISPLAY_DECIMAL_PLACES: int = 2

# Rates carry more precision than amounts ("1 USD ≈ 0.920 EUR").
RATE_DISPLAY_DECIMAL_PLACES: int = 3

# Separator between a price tag and its conversion ("USD 12.00 ➜ EUR 11.04").
CONVERSION_ARROW: str = "➜"

# ============================================================================
# PROVIDERS
# ============================================================================

# Provider name of 1:1 rates between a currency and itself.
PARITY_PROVIDER: str = "PARITY"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Babel Locale objects and locale-derived number formats kept in memory.
MAX_LOCALE_CACHE_SIZE: int = 128
