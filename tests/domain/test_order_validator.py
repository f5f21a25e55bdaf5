"""Unit tests for customer-form and cart validation."""

from dataclasses import replace
from datetime import date

import pytest

from bookstore.domain.exceptions import EntityNotFoundError, InvalidParameterError
from bookstore.domain.model.book import Book
from bookstore.domain.model.cart import BookForm, ShoppingCart, ShoppingCartItem
from bookstore.domain.model.customer import CustomerForm
from bookstore.domain.service.order_validator import (
    expiry_date_is_valid,
    is_cc_number_valid,
    is_email_valid,
    is_phone_valid,
    validate_cart,
    validate_customer,
)
from tests.fakes import FakeBookRepository

TODAY = date(2025, 6, 15)

VALID_FORM = CustomerForm(
    name="Jane Reader",
    address="12 Library Lane",
    phone="(123) 456-7890",
    email="jane@example.com",
    cc_number="4111 1111 1111 1111",
    cc_expiry_month="12",
    cc_expiry_year="2030",
)

DUNE = Book(
    id=1002,
    title="Dune",
    author="Frank Herbert",
    description="",
    price=1899,
    is_public=True,
    is_featured=False,
    category_id=1,
    rating=4,
)


# ── Customer fields ──────────────────────────────────────────────────────────


class TestNameAndAddress:

    @pytest.mark.parametrize("name", ["abcd", "x" * 45])
    def test_name_within_bounds_accepted(self, name):
        validate_customer(replace(VALID_FORM, name=name), TODAY)

    @pytest.mark.parametrize("name", [None, "", "abc", "x" * 46])
    def test_name_out_of_bounds_rejected(self, name):
        with pytest.raises(InvalidParameterError, match="Invalid name field"):
            validate_customer(replace(VALID_FORM, name=name), TODAY)

    @pytest.mark.parametrize("address", [None, "", "123", "y" * 46])
    def test_address_out_of_bounds_rejected(self, address):
        with pytest.raises(InvalidParameterError, match="Invalid address field"):
            validate_customer(replace(VALID_FORM, address=address), TODAY)


class TestPhone:

    @pytest.mark.parametrize("phone", ["123-456-7890", "(123) 456 7890", "1234567890"])
    def test_valid(self, phone):
        assert is_phone_valid(phone)

    @pytest.mark.parametrize(
        "phone", [None, "", "12345", "abcdefghij", "12345678901", "123.456.7890"]
    )
    def test_invalid(self, phone):
        assert not is_phone_valid(phone)

    def test_rejected_by_validate_customer(self):
        with pytest.raises(InvalidParameterError, match="Invalid phone field"):
            validate_customer(replace(VALID_FORM, phone="12345"), TODAY)


class TestEmail:

    def test_valid(self):
        assert is_email_valid("a@b.com")

    @pytest.mark.parametrize("email", [None, "", "a@b.", "a b@c.com", "ab.com"])
    def test_invalid(self, email):
        assert not is_email_valid(email)

    def test_rejected_by_validate_customer(self):
        with pytest.raises(InvalidParameterError, match="Invalid email field"):
            validate_customer(replace(VALID_FORM, email="a@b."), TODAY)


class TestCcNumber:

    @pytest.mark.parametrize(
        "cc", ["1234-5678-9012-3456", "12345678901234", "1234 5678 9012 345"]
    )
    def test_valid(self, cc):
        assert is_cc_number_valid(cc)

    @pytest.mark.parametrize("cc", [None, "", "123", "1234567890123", "12345678901234567"])
    def test_invalid(self, cc):
        assert not is_cc_number_valid(cc)

    def test_characters_are_not_checked(self):
        assert is_cc_number_valid("abcdefghijklmn")

    def test_rejected_by_validate_customer(self):
        with pytest.raises(InvalidParameterError, match="Invalid Credit Card Number"):
            validate_customer(replace(VALID_FORM, cc_number="123"), TODAY)


class TestExpiry:

    @pytest.mark.parametrize(
        "month, year", [("", ""), (None, None), ("", "2001"), ("1", "")]
    )
    def test_missing_part_is_valid(self, month, year):
        assert expiry_date_is_valid(month, year, TODAY)

    def test_current_month_is_valid(self):
        assert expiry_date_is_valid("6", "2025", TODAY)

    def test_future_is_valid(self):
        assert expiry_date_is_valid("1", "2026", TODAY)

    def test_past_month_is_invalid(self):
        assert not expiry_date_is_valid("5", "2025", TODAY)

    def test_past_year_is_invalid(self):
        assert not expiry_date_is_valid("12", "2024", TODAY)

    @pytest.mark.parametrize(
        "month, year", [("13", "2030"), ("ab", "2030"), ("1", "20x0"), ("1", "10000")]
    )
    def test_unparseable_is_invalid(self, month, year):
        assert not expiry_date_is_valid(month, year, TODAY)

    def test_rejected_by_validate_customer(self):
        form = replace(VALID_FORM, cc_expiry_month="1", cc_expiry_year="2020")
        with pytest.raises(InvalidParameterError, match="Invalid expiry date"):
            validate_customer(form, TODAY)

    def test_empty_expiry_passes_validate_customer(self):
        validate_customer(replace(VALID_FORM, cc_expiry_month="", cc_expiry_year=""), TODAY)


class TestValidateCustomerOrder:

    def test_first_failing_rule_is_reported(self):
        form = replace(VALID_FORM, name="", phone="bad", email="bad")
        with pytest.raises(InvalidParameterError, match="Invalid name field"):
            validate_customer(form, TODAY)


# ── Cart ─────────────────────────────────────────────────────────────────────


def _item(book: Book = DUNE, quantity: int = 1, **snapshot) -> ShoppingCartItem:
    form = BookForm(
        price=snapshot.get("price", book.price),
        category_id=snapshot.get("category_id", book.category_id),
    )
    return ShoppingCartItem(book_id=book.id, quantity=quantity, book_form=form)


class TestValidateCart:

    def test_matching_cart_accepted(self):
        validate_cart(ShoppingCart([_item(quantity=2)], surcharge=500), FakeBookRepository([DUNE]))

    def test_empty_cart_rejected(self):
        with pytest.raises(InvalidParameterError, match="Cart is empty"):
            validate_cart(ShoppingCart(surcharge=500), FakeBookRepository([DUNE]))

    @pytest.mark.parametrize("quantity", [0, 99])
    def test_quantity_bounds_accepted(self, quantity):
        validate_cart(ShoppingCart([_item(quantity=quantity)]), FakeBookRepository([DUNE]))

    @pytest.mark.parametrize("quantity", [-1, 100])
    def test_quantity_out_of_bounds_rejected(self, quantity):
        with pytest.raises(InvalidParameterError, match="Invalid quantity"):
            validate_cart(ShoppingCart([_item(quantity=quantity)]), FakeBookRepository([DUNE]))

    def test_stale_price_rejected(self):
        cart = ShoppingCart([_item(price=1799)])
        with pytest.raises(InvalidParameterError, match="Price of books are mismatched"):
            validate_cart(cart, FakeBookRepository([DUNE]))

    def test_stale_category_rejected(self):
        cart = ShoppingCart([_item(category_id=9)])
        with pytest.raises(InvalidParameterError, match="Category of books are mismatched"):
            validate_cart(cart, FakeBookRepository([DUNE]))

    def test_unknown_book_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Book #1002 not found"):
            validate_cart(ShoppingCart([_item()]), FakeBookRepository())

    def test_items_checked_in_cart_order(self):
        cart = ShoppingCart([_item(quantity=100), _item(price=1)])
        with pytest.raises(InvalidParameterError, match="Invalid quantity"):
            validate_cart(cart, FakeBookRepository([DUNE]))

    def test_bad_quantity_short_circuits_catalog_lookup(self):
        books = FakeBookRepository([DUNE])
        with pytest.raises(InvalidParameterError):
            validate_cart(ShoppingCart([_item(quantity=-5)]), books)
        assert books.lookups == 0
