"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Settings come from the
environment and are read on every call, so tests can point the
application at a temporary directory.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from bookstore.application.place_order import PlaceOrderHandler
from bookstore.application.show_order_details import ShowOrderDetailsHandler
from bookstore.domain.repository.unit_of_work import UnitOfWorkFactory
from bookstore.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)
from bookstore.infrastructure.persistence.sqlalchemy_models import create_schema
from bookstore.infrastructure.persistence.sqlalchemy_unit_of_work import (
    SqlAlchemyUnitOfWork,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
_DEFAULT_SURCHARGE = 500


def data_dir() -> Path:
    return Path(os.getenv("BOOKSTORE_DATA_DIR", str(_DEFAULT_DATA_DIR)))


def database_url() -> str:
    url = os.getenv("BOOKSTORE_DATABASE_URL")
    if url:
        return url
    directory = data_dir()
    directory.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{directory / 'bookstore.db'}"


def surcharge() -> int:
    """Cart surcharge in cents."""
    return int(os.getenv("BOOKSTORE_SURCHARGE", str(_DEFAULT_SURCHARGE)))


@lru_cache(maxsize=None)
def _engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connect_args)
    create_schema(engine)
    return engine


def book_repository() -> JsonBookRepository:
    return JsonBookRepository(data_dir() / "books.json")


def unit_of_work_factory() -> UnitOfWorkFactory:
    session_factory = sessionmaker(bind=_engine(database_url()), expire_on_commit=False)
    return lambda: SqlAlchemyUnitOfWork(session_factory)


def place_order_handler() -> PlaceOrderHandler:
    return PlaceOrderHandler(
        book_repo=book_repository(),
        uow_factory=unit_of_work_factory(),
    )


def show_order_details_handler() -> ShowOrderDetailsHandler:
    return ShowOrderDetailsHandler(
        book_repo=book_repository(),
        uow_factory=unit_of_work_factory(),
    )
