"""Abstract repository for the book catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is read-only to the order workflow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.book import Book


class BookRepository(ABC):

    @abstractmethod
    def get_by_id(self, book_id: int) -> Book | None:
        """Return a book by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book in the catalog."""
