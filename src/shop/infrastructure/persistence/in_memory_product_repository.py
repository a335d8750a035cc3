"""In-memory implementation of ProductRepository (a fixed catalog)."""

from __future__ import annotations

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product]) -> None:
        seen: set[int] = set()
        for p in products:
            if p.id in seen:
                raise ValidationError(f"Duplicate product ID {p.id} in catalog")
            seen.add(p.id)
        self._products = tuple(products)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._products)
