"""SQLAlchemy implementations of the customer, order and line-item stores.

Each repository works on the Session of the unit of work that created it,
so every write joins that unit's transaction. ``create`` flushes to obtain
the generated primary key without committing.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date, timezone
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.domain.exceptions import StorageError
from bookstore.domain.model.customer import Customer
from bookstore.domain.model.order import LineItem, Order
from bookstore.domain.repository.customer_repository import CustomerRepository
from bookstore.domain.repository.line_item_repository import LineItemRepository
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.infrastructure.persistence.sqlalchemy_models import (
    CustomerRow,
    LineItemRow,
    OrderRow,
)


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Re-raise driver errors as StorageError, keeping the cause."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(f"Failed to {action}") from exc


class SqlAlchemyCustomerRepository(CustomerRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(
        self,
        name: str,
        address: str,
        phone: str,
        email: str,
        cc_number: str,
        cc_expiry_date: date | None,
    ) -> int:
        row = CustomerRow(
            name=name,
            address=address,
            phone=phone,
            email=email,
            cc_number=cc_number,
            cc_exp_date=cc_expiry_date,
        )
        with storage_errors("create customer"):
            self._session.add(row)
            self._session.flush()
        return row.customer_id

    def get_by_id(self, customer_id: int) -> Customer | None:
        with storage_errors("load customer"):
            row = self._session.get(CustomerRow, customer_id)
        if row is None:
            return None
        return Customer(
            id=row.customer_id,
            name=row.name,
            address=row.address,
            phone=row.phone,
            email=row.email,
            cc_number=row.cc_number,
            cc_expiry_date=row.cc_exp_date,
        )


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, amount: int, confirmation_number: int, customer_id: int) -> int:
        row = OrderRow(
            amount=amount,
            confirmation_number=confirmation_number,
            customer_id=customer_id,
        )
        with storage_errors("create order"):
            self._session.add(row)
            self._session.flush()
        return row.order_id

    def get_by_id(self, order_id: int) -> Order | None:
        with storage_errors("load order"):
            row = self._session.get(OrderRow, order_id)
        if row is None:
            return None
        created = row.date_created
        # SQLite drops the offset on the way back.
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return Order(
            id=row.order_id,
            amount=row.amount,
            confirmation_number=row.confirmation_number,
            customer_id=row.customer_id,
            date_created=created,
        )


class SqlAlchemyLineItemRepository(LineItemRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, order_id: int, book_id: int, quantity: int) -> int:
        row = LineItemRow(order_id=order_id, book_id=book_id, quantity=quantity)
        with storage_errors("create line item"):
            self._session.add(row)
            self._session.flush()
        return row.line_item_id

    def list_by_order_id(self, order_id: int) -> list[LineItem]:
        stmt = (
            select(LineItemRow)
            .where(LineItemRow.order_id == order_id)
            .order_by(LineItemRow.line_item_id)
        )
        with storage_errors("load line items"):
            rows = self._session.scalars(stmt).all()
        return [
            LineItem(
                id=row.line_item_id,
                order_id=row.order_id,
                book_id=row.book_id,
                quantity=row.quantity,
            )
            for row in rows
        ]
