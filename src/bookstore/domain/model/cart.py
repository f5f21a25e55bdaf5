"""Shopping cart, as handed over by the caller at checkout.

The cart is never persisted. Each item carries a snapshot of the book's
price and category taken when the item was added, so stale carts can be
detected against the catalog before the order is placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bookstore.domain.model.book import Book


@dataclass(frozen=True)
class BookForm:
    """Snapshot of the book data the customer saw."""

    price: int  # cents
    category_id: int

    @staticmethod
    def of(book: Book) -> BookForm:
        return BookForm(price=book.price, category_id=book.category_id)


@dataclass(frozen=True)
class ShoppingCartItem:
    book_id: int
    quantity: int
    book_form: BookForm


@dataclass
class ShoppingCart:
    items: list[ShoppingCartItem] = field(default_factory=list)
    surcharge: int = 0  # cents

    def add(self, book: Book, quantity: int = 1) -> None:
        self.items.append(
            ShoppingCartItem(book_id=book.id, quantity=quantity, book_form=BookForm.of(book))
        )

    @property
    def computed_subtotal(self) -> int:
        return sum(item.book_form.price * item.quantity for item in self.items)

    @property
    def total(self) -> int:
        return self.computed_subtotal + self.surcharge
