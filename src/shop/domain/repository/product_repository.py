"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete catalog lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""
