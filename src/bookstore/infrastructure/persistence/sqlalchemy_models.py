"""SQLAlchemy table mappings for the order stores.

Books are not mapped here: the catalog lives in its own store, so
``book_id`` on a line item is a plain integer, not a foreign key.
Phone and card numbers are stored as typed. Separators are not limited,
so those columns have no length cap.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CustomerRow(Base):
    __tablename__ = "customer"
    customer_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(45), nullable=False)
    address = Column(String(45), nullable=False)
    phone = Column(Text, nullable=False)
    email = Column(String(255), nullable=False)
    cc_number = Column(Text, nullable=False)
    cc_exp_date = Column(Date, nullable=True)


class OrderRow(Base):
    __tablename__ = "customer_order"
    order_id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Integer, nullable=False)
    date_created = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    confirmation_number = Column(Integer, nullable=False)
    customer_id = Column(Integer, ForeignKey("customer.customer_id"), nullable=False)


class LineItemRow(Base):
    __tablename__ = "order_line_item"
    line_item_id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer, ForeignKey("customer_order.order_id"), nullable=False, index=True
    )
    book_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)


def create_schema(engine: Engine) -> None:
    Base.metadata.create_all(engine)
