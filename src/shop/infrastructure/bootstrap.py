"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
It also holds the application's configuration: the seed catalog, the
currency and the logging setup.
"""

from __future__ import annotations

import logging

from shop.domain.model.product import Product
from shop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from shop.domain.service.shop import Shop
from shop.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from shop.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

logger = logging.getLogger(__name__)

CURRENCY = DEFAULT_CURRENCY

# (id, name, price) of the catalog every shop starts with.
SEED_PRODUCTS: tuple[tuple[int, str, str], ...] = (
    (1, "Laptop", "25000"),
    (2, "Mouse", "500"),
    (3, "Keyboard", "1200"),
    (4, "Monitor", "8000"),
    (5, "Headphones", "3000"),
    (6, "Webcam", "1500"),
    (7, "USB flash drive 64GB", "300"),
)

# Log lines go to stderr so they never mix with the menu on stdout.
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def product_repository() -> InMemoryProductRepository:
    products = [
        Product(id=product_id, name=name, price=Money.of(price, CURRENCY))
        for product_id, name, price in SEED_PRODUCTS
    ]
    logger.debug("Seeded catalog with %d products", len(products))
    return InMemoryProductRepository(products)


def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


def shop() -> Shop:
    return Shop(
        product_repo=product_repository(),
        order_repo=order_repository(),
        currency=CURRENCY,
    )
