"""SQLAlchemy repository factory."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share one session, so a single commit covers every
    write made through the factory.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self._transaction_repo: TransactionRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def transaction_repository(self) -> TransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = TransactionRepositorySQLAlchemy(self._session)
        return self._transaction_repo
