"""Domain service: Shop.

The Shop owns the fixed catalog and the list of live orders and mediates
every lookup and lifecycle change. Lookups signal "not found" with None;
deciding whether that is an error is left to the caller.
"""

from __future__ import annotations

import logging

from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class Shop:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._currency = currency

    # --- Catalog --------------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_product_by_id(self, product_id: int) -> Product | None:
        return self._product_repo.get_by_id(product_id)

    # --- Orders ---------------------------------------------------------------

    def create_order(self) -> Order:
        """Create an empty order with the next sequential ID and keep it."""
        order = Order(id=self._order_repo.next_id(), currency=self._currency)
        self._order_repo.add(order)
        logger.info("Order #%s created", order.id)
        return order

    def get_order_by_id(self, order_id: int) -> Order | None:
        return self._order_repo.get_by_id(order_id)

    def delete_order(self, order_id: int) -> bool:
        """Remove an order. Returns False when no such order exists."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return False
        self._order_repo.remove(order)
        logger.info("Order #%s deleted", order_id)
        return True

    def list_orders(self) -> list[Order]:
        return self._order_repo.list_all()

    def grand_total(self) -> Money:
        result = Money.zero(self._currency)
        for order in self._order_repo.list_all():
            result = result + order.total
        return result
