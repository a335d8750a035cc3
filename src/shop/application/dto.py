"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the menu and application layers without
exposing domain internals. Money and timestamps arrive pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.order import Order
from shop.domain.model.product import Product

TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M"


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "500.00 ₴"


@dataclass(frozen=True)
class OrderLineItemDTO:
    """A single line item as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """A complete order as displayed to the user."""

    id: int
    created_at: str
    items: list[OrderLineItemDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items

    def has_product(self, product_id: int) -> bool:
        return any(item.product_id == product_id for item in self.items)


@dataclass(frozen=True)
class OrderSummaryDTO:
    """One row of the all-orders report."""

    id: int
    created_at: str
    item_count: int
    total: str


@dataclass(frozen=True)
class OrdersReportDTO:
    orders: list[OrderSummaryDTO]
    grand_total: str

    @property
    def is_empty(self) -> bool:
        return not self.orders


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=str(product.price))


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product.name,
                quantity=item.quantity,
                unit_price=str(item.product.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
    )


def order_to_summary_dto(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
        item_count=order.line_count,
        total=str(order.total),
    )
