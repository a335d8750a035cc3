"""Application service: Delete Order use case."""

from __future__ import annotations

from shop.domain.exceptions import OrderNotFoundError
from shop.domain.service.shop import Shop


class DeleteOrderHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self, order_id: int) -> None:
        if not self._shop.delete_order(order_id):
            raise OrderNotFoundError(order_id)
