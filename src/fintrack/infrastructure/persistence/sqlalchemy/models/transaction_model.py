"""SQLAlchemy model for classified transactions."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, Date, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

MERCHANT_MAX_LENGTH = 255
ACCOUNT_TYPE_MAX_LENGTH = 50


class TransactionModel(Base, TimestampMixin):
    """Database model for manual and imported transactions.

    Amounts are stored unsigned; ``type`` holds the direction. Category
    and type are stored as their string values.
    """

    __tablename__ = "transactions"

    # Ids are never reused (sqlite_autoincrement below)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    merchant: Mapped[str] = mapped_column(
        String(MERCHANT_MAX_LENGTH),
        nullable=False,
        default="",
    )
    account_type: Mapped[str] = mapped_column(
        String(ACCOUNT_TYPE_MAX_LENGTH),
        nullable=False,
        default="",
    )

    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(10), nullable=False)

    imported: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    source_id: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="",
        index=True,
    )
    recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, date={self.date}, "
            f"amount={self.amount}, category='{self.category}')>"
        )
