"""Customer input and the persisted customer record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CustomerForm:
    """Input: billing and shipping details as typed by the customer.

    Every field is a raw string; the expiry month and year may be empty
    because the expiry date is optional.
    """

    name: str | None
    address: str | None
    phone: str | None
    email: str | None
    cc_number: str | None
    cc_expiry_month: str | None = ""
    cc_expiry_year: str | None = ""


@dataclass
class Customer:
    """A customer record. One is created for every placed order."""

    id: int
    name: str
    address: str
    phone: str
    email: str
    cc_number: str
    cc_expiry_date: date | None

    @property
    def masked_cc_number(self) -> str:
        digits = self.cc_number.replace(" ", "").replace("-", "")
        return "*" * max(len(digits) - 4, 0) + digits[-4:]
