"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next order ID. IDs are never handed out twice."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in creation order."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Append a new order."""

    @abstractmethod
    def remove(self, order: Order) -> None:
        """Remove an existing order."""
