"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import OrderNotFoundError
from shop.domain.service.shop import Shop


class ShowOrderHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self, order_id: int) -> OrderDTO:
        order = self._shop.get_order_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order_to_dto(order)
