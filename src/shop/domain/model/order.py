"""Order aggregate and its line items.

The Order owns its line items, keyed by product ID. Products themselves are
shared with the catalog; a line item only adds the quantity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from shop.domain.model.product import Product
from shop.domain.model.value_objects import DEFAULT_CURRENCY, Money

logger = logging.getLogger(__name__)


@dataclass
class OrderLineItem:
    """One (product, quantity) association within an order."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class Order:
    """Aggregate root for customer orders.

    IDs are allocated by the order repository (see ``Shop.create_order``);
    the order itself never picks its own number.

    Invariant: a line item whose quantity is set through
    ``update_product_quantity`` is never left at zero or below.
    ``add_product`` does not check the sign of the increment.

    The total is summed in ``currency``, which must match the catalog prices.
    """

    id: int
    lines: dict[int, OrderLineItem] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.now)
    currency: str = DEFAULT_CURRENCY

    # --- Line item mutations --------------------------------------------------

    def add_product(self, product: Product, quantity: int) -> None:
        """Add *quantity* units, summing onto an existing line if present."""
        if quantity <= 0:
            logger.warning(
                "Order #%s: adding non-positive quantity %s of product %s",
                self.id, quantity, product.id,
            )

        line = self.lines.get(product.id)
        if line is None:
            self.lines[product.id] = OrderLineItem(product=product, quantity=quantity)
        else:
            line.quantity += quantity

    def remove_product(self, product: Product) -> None:
        """Drop the line for *product*. Absent products are a no-op."""
        self.lines.pop(product.id, None)

    def update_product_quantity(self, product: Product, new_quantity: int) -> None:
        """Set the quantity of an existing line.

        A quantity of zero or less removes the line (a no-op if absent).
        A positive quantity only updates a line that already exists; it
        never inserts a new one.
        """
        if new_quantity <= 0:
            self.lines.pop(product.id, None)
        elif product.id in self.lines:
            self.lines[product.id].quantity = new_quantity

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> list[OrderLineItem]:
        return list(self.lines.values())

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.lines.values():
            result = result + item.line_total
        return result
