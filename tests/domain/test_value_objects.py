"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ecshop.domain.exceptions import ValidationError
from ecshop.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("1200"))
        assert m.amount == Decimal("1200")
        assert m.currency == "JPY"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * True

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="cannot combine"):
            Money.of("10", "JPY") + Money.of("5", "USD")

    def test_zero(self):
        assert Money.zero() == Money.of("0")
