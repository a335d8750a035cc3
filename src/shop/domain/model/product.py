"""Product entity.

Products form the fixed catalog. They are created once when the shop is
assembled and are shared by reference with every order line that uses them.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A catalog entry. Immutable; there is no price-update path."""

    id: int
    name: str
    price: Money

    def __post_init__(self) -> None:
        if self.price.amount < 0:
            raise ValidationError(
                f"Product price cannot be negative, got {self.price.amount}"
            )

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} - {self.price}"
