"""Hypothesis strategies for currencies and price tag texts.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from sesters.currency import ALL_CURRENCIES, Currency
from sesters.parsing import COMMON

from .numbers import formatted_amounts

currencies = st.sampled_from(ALL_CURRENCIES)
"""Any statically registered currency."""


@composite
def currency_tokens(draw: st.DrawFn, currency: Currency) -> str:
    """Generate a token denoting ``currency``, in any letter case.

    Events emitted:
    - token_kind={iso|symbol}
    - token_case={as_declared|lower|upper}
    """
    kind = draw(st.sampled_from(["iso", "symbol"]))
    token = draw(st.sampled_from(currency.isos if kind == "iso" else currency.symbols))

    case = draw(st.sampled_from(["as_declared", "lower", "upper"]))
    match case:
        case "lower":
            token = token.lower()
        case "upper":
            token = token.upper()
        case _:
            pass

    event(f"token_kind={kind}")
    event(f"token_case={case}")
    return token


@composite
def price_tag_texts(draw: st.DrawFn) -> tuple[str, Currency, float]:
    """Generate (text, currency, amount) with a single token and amount.

    Token and amount are separated by one space, on either side.

    Events emitted:
    - price_tag_layout={token_first|amount_first}
    """
    currency = draw(currencies)
    token = draw(currency_tokens(currency))
    amount_text, amount = draw(formatted_amounts(COMMON))

    layout = draw(st.sampled_from(["token_first", "amount_first"]))
    if layout == "token_first":
        text = f"{token} {amount_text}"
    else:
        text = f"{amount_text} {token}"

    event(f"price_tag_layout={layout}")
    return text, currency, amount
