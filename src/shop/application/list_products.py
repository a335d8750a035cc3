"""Application service: List Products use case (query)."""

from __future__ import annotations

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.service.shop import Shop


class ListProductsHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._shop.products]
