"""Application service: List Orders use case (query).

Builds the all-orders report: one summary row per order plus the grand
total across every order.
"""

from __future__ import annotations

from shop.application.dto import OrdersReportDTO, order_to_summary_dto
from shop.domain.service.shop import Shop


class ListOrdersHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self) -> OrdersReportDTO:
        return OrdersReportDTO(
            orders=[order_to_summary_dto(o) for o in self._shop.list_orders()],
            grand_total=str(self._shop.grand_total()),
        )
