"""Abstract repository for Customer records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from bookstore.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def create(
        self,
        name: str,
        address: str,
        phone: str,
        email: str,
        cc_number: str,
        cc_expiry_date: date | None,
    ) -> int:
        """Insert a customer and return its generated ID."""

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""
