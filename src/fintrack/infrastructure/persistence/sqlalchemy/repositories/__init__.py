"""SQLAlchemy repository implementations."""

from fintrack.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

__all__ = ["SQLAlchemyRepositoryFactory", "TransactionRepositorySQLAlchemy"]
