"""Abstract repository for Order records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def create(self, amount: int, confirmation_number: int, customer_id: int) -> int:
        """Insert an order and return its generated ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""
