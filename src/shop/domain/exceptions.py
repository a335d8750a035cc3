"""Errors raised by the catalog, orders and money arithmetic.

The menu prints ``str(exc)`` of any DomainException and returns to the
prompt, so each message is already the text the shopper sees.
"""


class DomainException(Exception):
    """Base class for shop errors the menu recovers from."""


class ValidationError(DomainException):
    """Bad catalog data or money: negative price, duplicate ID, mixed currencies."""


class EntityNotFoundError(DomainException):
    """Base for lookups by ID that found nothing."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__("Product not found!")
        self.product_id = product_id


class OrderNotFoundError(EntityNotFoundError):

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found!")
        self.order_id = order_id
