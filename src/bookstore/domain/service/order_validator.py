"""Domain service: order request validation.

Rejects a checkout request before anything is written. The checks run
in a fixed order and the first failure raises, so error messages are
deterministic. The only I/O is reading current book data from the catalog.
"""

from __future__ import annotations

import re
from datetime import date

from bookstore.domain.exceptions import EntityNotFoundError, InvalidParameterError
from bookstore.domain.model.cart import ShoppingCart
from bookstore.domain.model.customer import CustomerForm
from bookstore.domain.model.value_objects import CardExpiry
from bookstore.domain.repository.book_repository import BookRepository

MIN_FIELD_LENGTH = 4
MAX_FIELD_LENGTH = 45
PHONE_DIGITS = 10
MIN_CC_LENGTH = 14
MAX_CC_LENGTH = 16
MAX_QUANTITY = 99

_PHONE_SEPARATORS = re.compile(r"[ ()\-]")
_CC_SEPARATORS = re.compile(r"[ \-]")
_DIGITS = re.compile(r"\d+", re.ASCII)


# --- Customer ----------------------------------------------------------------


def validate_customer(form: CustomerForm, today: date | None = None) -> None:
    if not _is_length_valid(form.name):
        raise InvalidParameterError("Invalid name field")

    if not _is_length_valid(form.address):
        raise InvalidParameterError("Invalid address field")

    if not is_phone_valid(form.phone):
        raise InvalidParameterError("Invalid phone field")

    if not is_email_valid(form.email):
        raise InvalidParameterError("Invalid email field")

    if not is_cc_number_valid(form.cc_number):
        raise InvalidParameterError("Invalid Credit Card Number")

    if not expiry_date_is_valid(form.cc_expiry_month, form.cc_expiry_year, today):
        raise InvalidParameterError("Invalid expiry date")


def _is_length_valid(value: str | None) -> bool:
    return bool(value) and MIN_FIELD_LENGTH <= len(value) <= MAX_FIELD_LENGTH


def is_phone_valid(phone: str | None) -> bool:
    """Ten digits once spaces, hyphens and parentheses are removed."""
    if not phone:
        return False
    digits = _PHONE_SEPARATORS.sub("", phone)
    return _DIGITS.fullmatch(digits) is not None and len(digits) == PHONE_DIGITS


def is_email_valid(email: str | None) -> bool:
    if not email:
        return False
    return " " not in email and "@" in email and not email.endswith(".")


def is_cc_number_valid(cc_number: str | None) -> bool:
    """Only the length is checked, not that the characters are digits."""
    if not cc_number:
        return False
    stripped = _CC_SEPARATORS.sub("", cc_number)
    return MIN_CC_LENGTH <= len(stripped) <= MAX_CC_LENGTH


def expiry_date_is_valid(
    month: str | None, year: str | None, today: date | None = None
) -> bool:
    """An expiry is optional; when given it must not lie in the past."""
    if not month or not year:
        return True
    try:
        expiry = CardExpiry.parse(month, year)
    except InvalidParameterError:
        return False
    return expiry >= CardExpiry.current(today)


# --- Cart --------------------------------------------------------------------


def validate_cart(cart: ShoppingCart, book_repo: BookRepository) -> None:
    """Check quantities and re-verify each item against the catalog.

    A price or category that changed since the item was added means the
    customer saw stale data, so the order is refused.
    """
    if not cart.items:
        raise InvalidParameterError("Cart is empty.")

    for item in cart.items:
        if item.quantity < 0 or item.quantity > MAX_QUANTITY:
            raise InvalidParameterError("Invalid quantity")

        book = book_repo.get_by_id(item.book_id)
        if book is None:
            raise EntityNotFoundError(f"Book #{item.book_id} not found")

        if item.book_form.price != book.price:
            raise InvalidParameterError("Price of books are mismatched.")

        if item.book_form.category_id != book.category_id:
            raise InvalidParameterError("Category of books are mismatched.")
