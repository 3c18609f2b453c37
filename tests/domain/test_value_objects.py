"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from commerce.domain.exceptions import (
    CurrencyMismatchError,
    GuardError,
    UnsupportedCurrencyError,
)
from commerce.domain.model.value_objects import (
    Currency,
    FeatureName,
    Money,
    Quantity,
    Text,
    optional_text,
)


# ── Currency ─────────────────────────────────────────────────────────────────


class TestCurrency:

    def test_from_code_is_case_insensitive(self):
        assert Currency.from_code("usd") is Currency.USD
        assert Currency.from_code(" eur ") is Currency.EUR

    def test_unsupported_code_rejected(self):
        with pytest.raises(UnsupportedCurrencyError, match="Unsupported currency"):
            Currency.from_code("XYZ")

    def test_blank_code_rejected(self):
        with pytest.raises(UnsupportedCurrencyError):
            Currency.from_code("")

    def test_unsupported_currency_is_a_guard_violation(self):
        with pytest.raises(GuardError):
            Currency.from_code("ABC")

    def test_equality_by_code(self):
        assert Currency.from_code("GBP") == Currency.GBP
        assert Currency.GBP.code == "GBP"


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"), Currency.USD)
        assert m.amount == Decimal("10.50")
        assert m.currency is Currency.USD

    def test_of_factory_from_string(self):
        m = Money.of("25.99", "EUR")
        assert m.amount == Decimal("25.99")
        assert m.currency is Currency.EUR

    def test_of_factory_defaults_to_usd(self):
        assert Money.of(10).currency is Currency.USD

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(GuardError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(GuardError, match="cannot be negative"):
            Money(Decimal("-1"), Currency.USD)

    def test_float_amount_rejected(self):
        with pytest.raises(GuardError, match="must be a Decimal"):
            Money(1.5, Currency.USD)

    def test_missing_currency_rejected(self):
        with pytest.raises(GuardError, match="currency is required"):
            Money(Decimal("1"), None)

    def test_zero(self):
        z = Money.zero(Currency.EUR)
        assert z.is_zero
        assert z.currency is Currency.EUR

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_zero(self):
        assert (Money.of("7.50") * 0).is_zero

    def test_negative_multiplier_rejected(self):
        with pytest.raises(GuardError, match="cannot be negative"):
            Money.of("1") * -2

    def test_non_int_multiplier_rejected(self):
        with pytest.raises(GuardError):
            Money.of("1").multiply(1.5)

    def test_currency_mismatch_is_a_guard_violation(self):
        with pytest.raises(CurrencyMismatchError, match="Cannot combine USD with EUR"):
            Money.of("10", "USD") + Money.of("5", "EUR")

    def test_equality_is_by_value(self):
        assert Money.of("10.0") == Money.of("10.00")
        assert Money.of("10", "USD") != Money.of("10", "EUR")

    def test_str_formatting(self):
        assert str(Money.of("12.5")) == "12.50 USD"

    def test_immutable(self):
        m = Money.of("1")
        with pytest.raises(AttributeError):
            m.amount = Decimal("2")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(GuardError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(GuardError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(GuardError, match="must be an integer"):
            Quantity(True)


# ── Text / FeatureName ───────────────────────────────────────────────────────


class TestText:

    def test_parse_trims(self):
        assert Text.parse("  hello ") == Text("hello")

    @pytest.mark.parametrize("raw", [None, "", "   ", 42])
    def test_parse_blank_is_none(self, raw):
        assert Text.parse(raw) is None

    def test_untrimmed_construction_rejected(self):
        with pytest.raises(GuardError):
            Text(" padded ")

    def test_optional_text(self):
        assert optional_text("  why ") == "why"
        assert optional_text("   ") is None
        assert optional_text(None) is None


class TestFeatureName:

    def test_case_insensitive_equality(self):
        assert FeatureName.parse(" Color ") == FeatureName("COLOR")
        assert hash(FeatureName("color")) == hash(FeatureName("Color"))

    def test_keeps_original_spelling(self):
        assert FeatureName.parse(" Color ").value == "Color"
