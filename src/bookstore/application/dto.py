"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.order import OrderDetails


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (book ID + quantity)."""

    book_id: int
    quantity: int


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single line item as displayed to the user."""

    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDetailsDTO:
    """Output: a placed order as displayed to the user."""

    id: int
    confirmation_number: str
    customer_name: str
    customer_email: str
    cc_number: str  # masked
    items: list[LineItemDTO]
    total: str
    created_at: str

    @staticmethod
    def of(details: OrderDetails) -> OrderDetailsDTO:
        order, customer = details.order, details.customer
        return OrderDetailsDTO(
            id=order.id,
            confirmation_number=f"{order.confirmation_number:09d}",
            customer_name=customer.name,
            customer_email=customer.email,
            cc_number=customer.masked_cc_number,
            items=[
                LineItemDTO(
                    title=book.title,
                    quantity=item.quantity,
                    unit_price=str(book.unit_price),
                    line_total=str(book.unit_price * item.quantity),
                )
                for item, book in details.lines()
            ],
            total=str(details.total),
            created_at=order.date_created.strftime("%Y-%m-%d %H:%M UTC"),
        )
