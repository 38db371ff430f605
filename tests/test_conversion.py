"""Tests for converting price tags found in text."""

from __future__ import annotations

import logging

import pytest

from sesters.conversion import (
    Conversion,
    convert_price_tag,
    convert_text,
    resolve_destinations,
)
from sesters.currency import EUR, GBP, USD, Currency, CurrencyRegistry
from sesters.diagnostics import ConversionError
from sesters.engine import Engine
from sesters.price_tag import PriceTag
from sesters.rate import Rate

RATES: dict[tuple[str, str], float] = {
    ("USD", "EUR"): 0.92,
    ("USD", "GBP"): 0.8,
    ("EUR", "GBP"): 0.85,
}


def table_rates(src: Currency, dst: Currency) -> Rate | None:
    value = RATES.get((src.main_iso, dst.main_iso))
    return Rate(src, dst, value, "table") if value else None


@pytest.fixture(scope="module")
def engine() -> Engine:
    return Engine()


class TestResolveDestinations:
    """User-provided ISO codes."""

    def test_normalized(self) -> None:
        assert resolve_destinations([" eur", "usd"]) == (EUR, USD)

    def test_unknown_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sesters.conversion"):
            assert resolve_destinations(["XXX", "GBP"]) == (GBP,)
        assert "Invalid currency iso symbol 'XXX', ignored" in caplog.text

    def test_duplicates_kept_once(self) -> None:
        assert resolve_destinations(["EUR", "USD", "eur"]) == (EUR, USD)

    def test_custom_registry(self) -> None:
        assert resolve_destinations(["EUR", "USD"], CurrencyRegistry([USD])) == (USD,)


class TestConvertPriceTag:
    """One price tag, several destinations."""

    def test_converted(self) -> None:
        (conversion,) = convert_price_tag(PriceTag(USD, 12.0), [EUR], table_rates)
        assert conversion.source == PriceTag(USD, 12.0)
        assert conversion.result.currency is EUR
        assert conversion.result.amount == pytest.approx(11.04)
        assert conversion.rate.provider == "table"

    def test_same_currency_skipped(self) -> None:
        assert convert_price_tag(PriceTag(USD, 12.0), [USD], table_rates) == ()

    def test_missing_rate_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sesters.conversion"):
            assert convert_price_tag(PriceTag(GBP, 1.0), [EUR], table_rates) == ()
        assert "No rate retrieved for GBP -> EUR" in caplog.text

    def test_order_follows_destinations(self) -> None:
        conversions = convert_price_tag(PriceTag(USD, 1.0), [GBP, USD, EUR], table_rates)
        assert [c.result.currency for c in conversions] == [GBP, EUR]

    def test_wrong_rate_raises(self) -> None:
        def wrong(src: Currency, dst: Currency) -> Rate:
            return Rate(GBP, dst, 1.1)

        with pytest.raises(ConversionError):
            convert_price_tag(PriceTag(USD, 1.0), [EUR], wrong)


class TestConvertText:
    """End to end: find then convert."""

    def test_best_price_tag(self, engine: Engine) -> None:
        conversions = convert_text(engine, "USD 12", [EUR, USD], table_rates)
        assert [str(c) for c in conversions] == ["USD 12.00 ➜ EUR 11.04"]

    def test_nothing_found(self, engine: Engine, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="sesters.conversion"):
            assert convert_text(engine, "nothing", [EUR], table_rates) == ()
        assert "No currency found." in caplog.text

    def test_limit(self, engine: Engine) -> None:
        conversions = convert_text(engine, "$ 12 €", [GBP], table_rates, limit=2)
        assert sorted(c.source.currency.main_iso for c in conversions) == ["EUR", "USD"]
        assert all(c.result.currency is GBP for c in conversions)

    def test_default_limit_is_one(self, engine: Engine) -> None:
        assert len(convert_text(engine, "$ 12 €", [GBP], table_rates)) == 1

    def test_negative_limit(self, engine: Engine) -> None:
        with pytest.raises(ValueError):
            convert_text(engine, "USD 12", [EUR], table_rates, limit=-1)

    def test_destinations_iterated_once_per_text(self, engine: Engine) -> None:
        conversions = convert_text(engine, "$ 12 €", iter([GBP]), table_rates, limit=2)
        assert len(conversions) == 2

    def test_logs_rate(self, engine: Engine, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="sesters.conversion"):
            convert_text(engine, "USD 12", [EUR], table_rates)
        assert "Rate retrieved: 1 USD ≈ 0.920 EUR" in caplog.text


class TestConversion:
    """Conversion value object."""

    def test_str(self) -> None:
        rate = Rate(USD, EUR, 0.5)
        conversion = Conversion(PriceTag(USD, 2.0), PriceTag(EUR, 1.0), rate)
        assert str(conversion) == "USD 2.00 ➜ EUR 1.00"
