"""Abstract repository for order LineItems."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.order import LineItem


class LineItemRepository(ABC):

    @abstractmethod
    def create(self, order_id: int, book_id: int, quantity: int) -> int:
        """Insert a line item and return its generated ID."""

    @abstractmethod
    def list_by_order_id(self, order_id: int) -> list[LineItem]:
        """Return the line items of an order in insertion order."""
