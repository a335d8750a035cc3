"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "UAH"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_zero(self):
        assert Money.zero() == Money.of("0")

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_multiplication_by_negative_int_allowed(self):
        assert Money.of("500") * -2 == Money.of("-1000")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "UAH") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("500")) == "500.00 ₴"
        assert str(Money.of("25000")) == "25,000.00 ₴"
        assert str(Money.of("9.5", "USD")) == "9.50 $"

    def test_str_unknown_currency_uses_code(self):
        assert str(Money.of("1", "PLN")) == "1.00 PLN"
