"""Application service: Edit Order use cases.

Resolves the order and the catalog product, then delegates to the
Order aggregate. The aggregate's leniency is kept as-is: removing an
absent product or zeroing one that is not in the order succeeds silently.
"""

from __future__ import annotations

from shop.application.dto import OrderLineItemDTO
from shop.domain.exceptions import OrderNotFoundError, ProductNotFoundError
from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.service.shop import Shop


class EditOrderHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def add_product(self, order_id: int, product_id: int, quantity: int) -> OrderLineItemDTO:
        """Add *quantity* units of a product and return the resulting line."""
        order, product = self._resolve(order_id, product_id)
        order.add_product(product, quantity)
        line = order.lines[product.id]
        return OrderLineItemDTO(
            product_id=product.id,
            product_name=product.name,
            quantity=line.quantity,
            unit_price=str(product.price),
            line_total=str(line.line_total),
        )

    def change_quantity(self, order_id: int, product_id: int, new_quantity: int) -> None:
        order, product = self._resolve(order_id, product_id)
        order.update_product_quantity(product, new_quantity)

    def remove_product(self, order_id: int, product_id: int) -> None:
        order, product = self._resolve(order_id, product_id)
        order.remove_product(product)

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, order_id: int, product_id: int) -> tuple[Order, Product]:
        order = self._shop.get_order_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        product = self._shop.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return order, product
