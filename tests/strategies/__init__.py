"""Hypothesis strategies for Sesters property-based testing.

Strategies are organized by domain:

- numbers: Amounts rendered with a NumberFormat's separators
- currency: Currencies and the tokens they are written with

Usage:
    from tests.strategies import formatted_amounts, price_tag_texts
    from tests.strategies.currency import currencies, currency_tokens

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - formatted_amounts, currency_tokens, price_tag_texts
"""

from .currency import currencies, currency_tokens, price_tag_texts
from .numbers import amount_parts, formatted_amounts, group_digits

__all__ = [
    "amount_parts",
    "currencies",
    "currency_tokens",
    "formatted_amounts",
    "group_digits",
    "price_tag_texts",
]
