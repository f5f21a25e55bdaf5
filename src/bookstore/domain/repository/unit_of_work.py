"""Abstract unit of work: one transactional scope over the order stores.

Usage::

    with uow_factory() as uow:
        customer_id = uow.customers.create(...)
        ...
        uow.commit()

Leaving the ``with`` block always releases the scope. Anything not
committed by then is discarded. If the block is already raising, a
failure to release is logged and the original exception propagates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

import structlog

from bookstore.domain.exceptions import DomainException
from bookstore.domain.repository.customer_repository import CustomerRepository
from bookstore.domain.repository.line_item_repository import LineItemRepository
from bookstore.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UnitOfWork(ABC):
    customers: CustomerRepository
    orders: OrderRepository
    line_items: LineItemRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.close()
            return
        try:
            self.close()
        except DomainException:
            logger.warning("Failed to release unit of work", exc_info=True)

    @abstractmethod
    def commit(self) -> None:
        """Make every write in this scope durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted write in this scope."""

    @abstractmethod
    def close(self) -> None:
        """Release the scope; uncommitted writes are discarded."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
