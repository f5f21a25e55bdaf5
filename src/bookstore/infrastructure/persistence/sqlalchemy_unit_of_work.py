"""SQLAlchemy-backed UnitOfWork: one Session per scope."""

from __future__ import annotations

import structlog
from sqlalchemy.orm import Session, sessionmaker

from bookstore.domain.repository.unit_of_work import UnitOfWork
from bookstore.infrastructure.persistence.sqlalchemy_repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyLineItemRepository,
    SqlAlchemyOrderRepository,
    storage_errors,
)

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        with storage_errors("open database session"):
            self._session = self._session_factory()
        self.customers = SqlAlchemyCustomerRepository(self._session)
        self.orders = SqlAlchemyOrderRepository(self._session)
        self.line_items = SqlAlchemyLineItemRepository(self._session)
        return self

    def commit(self) -> None:
        with storage_errors("commit transaction"):
            self._session.commit()

    def rollback(self) -> None:
        with storage_errors("roll back transaction"):
            self._session.rollback()
        logger.debug("Transaction rolled back")

    def close(self) -> None:
        if self._session is None:
            return
        # Closing discards anything that was not committed.
        with storage_errors("close database session"):
            self._session.close()
        self._session = None
