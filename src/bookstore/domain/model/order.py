"""Order records and the composed order-details view.

An Order owns its line items; every order placed through the workflow
has at least one. The records are plain data: all business rules are
checked before anything is written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from bookstore.domain.model.book import Book
from bookstore.domain.model.customer import Customer
from bookstore.domain.model.value_objects import Money

# Confirmation numbers are drawn from [0, MAX_CONFIRMATION_NUMBER).
MAX_CONFIRMATION_NUMBER = 999_999_999


@dataclass
class Order:
    id: int
    amount: int  # cents, subtotal + surcharge
    confirmation_number: int
    customer_id: int
    date_created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Money:
        return Money(self.amount)


@dataclass
class LineItem:
    id: int
    order_id: int
    book_id: int
    quantity: int


@dataclass(frozen=True)
class OrderDetails:
    """Read-only view of a placed order for receipts and display.

    ``books[i]`` is the catalog entry for ``line_items[i]``.
    """

    order: Order
    customer: Customer
    line_items: list[LineItem]
    books: list[Book]

    @property
    def total(self) -> Money:
        return self.order.total

    def lines(self) -> list[tuple[LineItem, Book]]:
        return list(zip(self.line_items, self.books))
