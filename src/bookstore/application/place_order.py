"""Application service: Place Order use case.

Validates the request, then writes the customer, the order and its line
items inside a single unit of work. Either all three land or none do.
"""

from __future__ import annotations

import random
from datetime import date

import structlog

from bookstore.domain.exceptions import StorageError, TransactionFailedError
from bookstore.domain.model.cart import ShoppingCart
from bookstore.domain.model.customer import CustomerForm
from bookstore.domain.model.order import MAX_CONFIRMATION_NUMBER
from bookstore.domain.model.value_objects import CardExpiry
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory
from bookstore.domain.service.order_validator import validate_cart, validate_customer

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        book_repo: BookRepository,
        uow_factory: UnitOfWorkFactory,
        rng: random.Random | None = None,
        today: date | None = None,
    ) -> None:
        self._book_repo = book_repo
        self._uow_factory = uow_factory
        self._rng = rng or random.SystemRandom()
        self._today = today

    def handle(self, form: CustomerForm, cart: ShoppingCart) -> int:
        """Place an order and return its generated ID.

        Steps:
        1. Validate the customer form and the cart (no storage access).
        2. Open a fresh unit of work.
        3. Create customer -> order -> one line item per cart item.
        4. Commit, or roll back and raise TransactionFailedError.
        """
        validate_customer(form, self._today)
        validate_cart(cart, self._book_repo)

        expiry_date = self._expiry_date(form)

        with self._uow_factory() as uow:
            try:
                order_id = self._write_order(uow, form, expiry_date, cart)
                uow.commit()
            except Exception as exc:
                self._rollback(uow)
                logger.warning(
                    "Order placement rolled back",
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                raise TransactionFailedError("Order could not be placed") from exc

        logger.info(
            "Order placed",
            order_id=order_id,
            line_items=len(cart.items),
            amount=cart.total,
        )
        return order_id

    def _write_order(
        self,
        uow: UnitOfWork,
        form: CustomerForm,
        expiry_date: date | None,
        cart: ShoppingCart,
    ) -> int:
        customer_id = uow.customers.create(
            name=form.name,
            address=form.address,
            phone=form.phone,
            email=form.email,
            cc_number=form.cc_number,
            cc_expiry_date=expiry_date,
        )
        order_id = uow.orders.create(
            amount=cart.computed_subtotal + cart.surcharge,
            confirmation_number=self.generate_confirmation_number(),
            customer_id=customer_id,
        )
        for item in cart.items:
            uow.line_items.create(
                order_id=order_id, book_id=item.book_id, quantity=item.quantity
            )
        return order_id

    @staticmethod
    def _rollback(uow: UnitOfWork) -> None:
        try:
            uow.rollback()
        except Exception as exc:
            logger.error("Failed to roll back transaction", exc_info=True)
            raise StorageError("Failed to roll back transaction") from exc

    @staticmethod
    def _expiry_date(form: CustomerForm) -> date | None:
        """First day of the expiry month, or None when no expiry was given."""
        if not form.cc_expiry_month or not form.cc_expiry_year:
            return None
        return CardExpiry.parse(form.cc_expiry_month, form.cc_expiry_year).first_day()

    def generate_confirmation_number(self) -> int:
        # No uniqueness check; collisions are possible and accepted.
        return self._rng.randrange(MAX_CONFIRMATION_NUMBER)
