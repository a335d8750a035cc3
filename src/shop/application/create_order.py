"""Application service: Create Order use case.

New orders start empty; line items are added afterwards through
``EditOrderHandler``.
"""

from __future__ import annotations

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.service.shop import Shop


class CreateOrderHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self) -> OrderDTO:
        order = self._shop.create_order()
        return order_to_dto(order)
