"""SQLAlchemy models."""

from fintrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from fintrack.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    TransactionModel,
)

__all__ = ["Base", "TimestampMixin", "TransactionModel"]
