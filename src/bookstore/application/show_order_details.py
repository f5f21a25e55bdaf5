"""Application service: Show Order Details use case (query)."""

from __future__ import annotations

import structlog

from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.book import Book
from bookstore.domain.model.order import OrderDetails
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.unit_of_work import UnitOfWorkFactory

logger = structlog.get_logger(__name__)


class ShowOrderDetailsHandler:

    def __init__(self, book_repo: BookRepository, uow_factory: UnitOfWorkFactory) -> None:
        self._book_repo = book_repo
        self._uow_factory = uow_factory

    def handle(self, order_id: int) -> OrderDetails:
        """Join an order with its customer, line items and books.

        A missing customer or book for an existing order means the stored
        data is inconsistent; it is reported as EntityNotFoundError too.
        """
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            customer = uow.customers.get_by_id(order.customer_id)
            if customer is None:
                logger.error(
                    "Order references a missing customer",
                    order_id=order_id,
                    customer_id=order.customer_id,
                )
                raise EntityNotFoundError(
                    f"Customer #{order.customer_id} of order #{order_id} not found"
                )

            line_items = uow.line_items.list_by_order_id(order_id)

        books = [self._resolve_book(item.book_id, order_id) for item in line_items]
        return OrderDetails(order=order, customer=customer, line_items=line_items, books=books)

    def _resolve_book(self, book_id: int, order_id: int) -> Book:
        book = self._book_repo.get_by_id(book_id)
        if book is None:
            logger.error("Order references a missing book", order_id=order_id, book_id=book_id)
            raise EntityNotFoundError(f"Book #{book_id} of order #{order_id} not found")
        return book
