"""Unit tests for the Product entity."""

from dataclasses import FrozenInstanceError

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


class TestProduct:

    def test_str(self):
        product = Product(id=2, name="Mouse", price=Money.of("500"))
        assert str(product) == "[2] Mouse - 500.00 ₴"

    def test_free_product_allowed(self):
        product = Product(id=1, name="Sticker", price=Money.of("0"))
        assert product.price == Money.zero()

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product(id=1, name="Broken", price=Money.of("-1"))

    def test_immutable(self):
        product = Product(id=1, name="Mouse", price=Money.of("500"))
        with pytest.raises(FrozenInstanceError):
            product.price = Money.of("1")  # type: ignore[misc]
