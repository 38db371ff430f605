"""Tests for Currency, CurrencyRegistry and the static currency set."""

from __future__ import annotations

import dataclasses

import pytest

from sesters.currency import (
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
from sesters.enums import Position


class TestCurrency:
    """Currency data class."""

    def test_main_iso_is_first(self) -> None:
        assert BTC.main_iso == "BTC"
        assert BTC.isos == ("BTC", "XBT")

    def test_str_is_main_iso(self) -> None:
        assert str(EUR) == "EUR"

    def test_default_position_is_after(self) -> None:
        currency = Currency(symbols=("¤",), isos=("XXX",), names=("Test",))
        assert currency.position is Position.AFTER

    def test_lists_frozen_to_tuples(self) -> None:
        currency = Currency(symbols=["¤"], isos=["XXX", "XXY"], names=["Test"])
        assert currency.symbols == ("¤",)
        assert currency.isos == ("XXX", "XXY")

    def test_single_string_wrapped(self) -> None:
        currency = Currency(symbols="¤", isos="XXX", names="Test")
        assert currency.symbols == ("¤",)
        assert currency.main_iso == "XXX"

    @pytest.mark.parametrize("field_name", ["symbols", "isos", "names"])
    def test_empty_field_rejected(self, field_name: str) -> None:
        fields = {"symbols": ("¤",), "isos": ("XXX",), "names": ("Test",)}
        fields[field_name] = ()
        with pytest.raises(ValueError, match=field_name):
            Currency(**fields)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            EUR.position = Position.BEFORE  # type: ignore[misc]

    def test_hashable_and_equal_by_value(self) -> None:
        copy = Currency(symbols=("€",), isos=("EUR",), names=("Euro",))
        assert copy == EUR
        assert len({copy, EUR}) == 1


class TestDisplayName:
    """Human names, localized through CLDR when possible."""

    def test_without_locale(self) -> None:
        assert USD.display_name() == "United States dollar"

    def test_cldr_name(self) -> None:
        assert USD.display_name("en_US") == "US Dollar"

    def test_bcp47_locale(self) -> None:
        assert EUR.display_name("de-DE") == "Euro"

    def test_unknown_to_cldr_falls_back(self) -> None:
        assert BTC.display_name("en_US") == "Bitcoin"

    def test_unknown_locale_falls_back(self) -> None:
        assert GBP.display_name("xx_YY") == "Pound sterling"


class TestStaticCurrencies:
    """Symbols, codes and positions of the registered currencies."""

    @pytest.mark.parametrize(
        ("currency", "position"),
        [
            (BTC, Position.AFTER),
            (USD, Position.BEFORE),
            (EUR, Position.AFTER),
            (GBP, Position.BEFORE),
            (CHF, Position.BEFORE),
            (JPY, Position.BEFORE),
        ],
    )
    def test_positions(self, currency: Currency, position: Position) -> None:
        assert currency.position is position

    def test_symbols(self) -> None:
        assert BTC.symbols == ("₿", "฿", "Ƀ")
        assert USD.symbols == ("$",)
        assert EUR.symbols == ("€",)
        assert GBP.symbols == ("£",)
        assert CHF.symbols == ("CHF", "Fr.", "SFr.", "Fr.sv.", "₣")
        assert JPY.symbols == ("¥", "円", "圓")

    def test_all_currencies(self) -> None:
        assert ALL_CURRENCIES == (BTC, USD, EUR, GBP, CHF, JPY)

    def test_canonical_isos_unique(self) -> None:
        isos = [c.main_iso for c in ALL_CURRENCIES]
        assert len(isos) == len(set(isos))


class TestLookup:
    """Module-level lookup_by_iso."""

    @pytest.mark.parametrize("currency", ALL_CURRENCIES)
    def test_every_currency_found(self, currency: Currency) -> None:
        assert lookup_by_iso(currency.main_iso) is currency

    def test_unknown_code(self) -> None:
        assert lookup_by_iso("___") is None

    def test_case_exact(self) -> None:
        assert lookup_by_iso("usd") is None

    def test_secondary_iso_not_found(self) -> None:
        assert lookup_by_iso("XBT") is None


class TestCurrencyRegistry:
    """Registry container behavior."""

    def test_default_registry(self) -> None:
        assert len(DEFAULT_REGISTRY) == len(ALL_CURRENCIES)
        assert list(DEFAULT_REGISTRY) == list(ALL_CURRENCIES)
        assert DEFAULT_REGISTRY.currencies == ALL_CURRENCIES

    def test_contains_currency_and_code(self) -> None:
        registry = CurrencyRegistry([USD, EUR])
        assert USD in registry
        assert "EUR" in registry
        assert GBP not in registry
        assert "GBP" not in registry

    def test_contains_rejects_same_code_other_currency(self) -> None:
        registry = CurrencyRegistry([EUR])
        impostor = Currency(symbols=("E",), isos=("EUR",), names=("Fake",))
        assert impostor not in registry

    def test_duplicate_rejected(self) -> None:
        twin = Currency(symbols=("US$",), isos=("USD",), names=("Dollar",))
        with pytest.raises(ValueError, match="registered twice"):
            CurrencyRegistry([USD, twin])

    def test_repr(self) -> None:
        assert repr(CurrencyRegistry([USD, EUR])) == "CurrencyRegistry(USD, EUR)"
