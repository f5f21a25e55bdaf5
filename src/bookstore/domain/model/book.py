"""Book, as published by the catalog.

Books live independently of orders and are owned by the catalog.
The order workflow only ever reads them, so the dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.value_objects import Money


@dataclass(frozen=True)
class Book:
    id: int
    title: str
    author: str
    description: str
    price: int  # cents
    is_public: bool
    is_featured: bool
    category_id: int
    rating: int

    @property
    def unit_price(self) -> Money:
        return Money(self.price)
