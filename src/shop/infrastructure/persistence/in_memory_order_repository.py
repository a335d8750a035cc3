"""In-memory implementation of OrderRepository.

Orders live only for the lifetime of the process. The ID counter belongs to
the repository instance and only ever moves forward.
"""

from __future__ import annotations

from shop.domain.model.order import Order
from shop.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, first_id: int = 1) -> None:
        self._orders: list[Order] = []
        self._next_id = first_id

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        order_id = self._next_id
        self._next_id += 1
        return order_id

    def get_by_id(self, order_id: int) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def add(self, order: Order) -> None:
        self._orders.append(order)

    def remove(self, order: Order) -> None:
        self._orders = [o for o in self._orders if o.id != order.id]
