"""Quickstart example for sesters.

This example demonstrates finding price tags in plain text and converting
them with a rate source.

Note: The rate source below is a fixed table. In production, plug in a
client for an exchange rate API and cache its results.
"""

import logging
from datetime import timedelta

from sesters import (
    EUR,
    GBP,
    US,
    USD,
    Currency,
    Engine,
    NumberFormat,
    PriceTag,
    Rate,
    SestersError,
    convert_text,
)
from sesters.conversion import resolve_destinations
from sesters.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Default engine
print("=" * 50)
print("Example 1: Default Engine")
print("=" * 50)

engine = Engine()

print(engine.best_price_tag("Dinner was 42,50 € with tip"))
# Output: EUR 42.50

print(engine.best_price_tag("USD -12"))
# Output: USD -12.00

print(engine.best_price_tag("no price here"))
# Output: None

# Example 2: Ambiguity is reported, not resolved
print("\n" + "=" * 50)
print("Example 2: Ambiguous Text")
print("=" * 50)

for match in engine.find("$ 12 €"):
    print(match.to_price_tag(), "distance:", match.distance)
# Output:
# EUR 12.00 distance: 0
# USD 12.00 distance: 1

print(engine.top_price_tags(1, "$ 12 €"))
# Output: [PriceTag(currency=..., amount=12.0)]

# Example 3: Options
print("\n" + "=" * 50)
print("Example 3: Engine Options")
print("=" * 50)

us_engine = Engine(currencies=(USD,), number_format=US, window_size=3)
print(us_engine.all_price_tags("Total: USD 1,234.56"))
# Output: [PriceTag(currency=..., amount=1234.56)]

de_engine = Engine(number_format=NumberFormat.for_locale("de_DE"))
print(de_engine.best_price_tag("Preis: 1.234,56 EUR"))
# Output: EUR 1234.56

# Example 4: Locale-aware rendering
print("\n" + "=" * 50)
print("Example 4: Rendering")
print("=" * 50)

tag = PriceTag(EUR, 1234.5)
print(tag)
# Output: EUR 1234.50
print(tag.format("de_DE"))
# Output: 1.234,50 €
print(tag.format("en_US"))
# Output: €1,234.50

# Example 5: Conversion
print("\n" + "=" * 50)
print("Example 5: Conversion")
print("=" * 50)

TABLE = {("USD", "EUR"): 0.92, ("USD", "GBP"): 0.79}


def table_rates(src: Currency, dst: Currency) -> Rate | None:
    value = TABLE.get((src.main_iso, dst.main_iso))
    if value is None:
        return None
    return Rate.now(src, dst, value, "table", cache_for=timedelta(hours=1))


logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

destinations = resolve_destinations(["eur", "gbp", "xyz"])
# Logs: WARNING sesters.conversion: Invalid currency iso symbol 'xyz', ignored

for conversion in convert_text(engine, "It costs $ 12", destinations, table_rates):
    print(conversion)
# Output:
# USD 12.00 ➜ EUR 11.04
# USD 12.00 ➜ GBP 9.48

# Example 6: Errors
print("\n" + "=" * 50)
print("Example 6: Configuration Errors")
print("=" * 50)

try:
    Engine(window_size=-1)
except SestersError as e:
    print(e)
# Output:
# error[WINDOW_SIZE_INVALID]: Window size must be >= 0, got -1
#   = help: The window is a character distance; use 0 for adjacent tokens only

try:
    PriceTag(GBP, 10.0).convert(Rate(USD, EUR, 0.92))
except SestersError as e:
    if e.diagnostic is not None:
        print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))
# Output: {"code": "CONVERSION_CURRENCY_MISMATCH", "code_value": 3001, ...}

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
