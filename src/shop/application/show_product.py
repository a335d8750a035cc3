"""Application service: Show Product use case (query)."""

from __future__ import annotations

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import ProductNotFoundError
from shop.domain.service.shop import Shop


class ShowProductHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self, product_id: int) -> ProductDTO:
        product = self._shop.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product_to_dto(product)
