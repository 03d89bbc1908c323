"""Repository factory backed by in-process stores."""

from __future__ import annotations

from typing import Optional

from fintrack.infrastructure.persistence.in_memory.transaction_repository import (
    InMemoryTransactionRepository,
)


class InMemoryRepositoryFactory:
    """In-memory implementation of the RepositoryFactory Protocol."""

    def __init__(
        self,
        transaction_repository: Optional[InMemoryTransactionRepository] = None,
    ):
        self._transaction_repo = (
            transaction_repository or InMemoryTransactionRepository()
        )

    def transaction_repository(self) -> InMemoryTransactionRepository:
        return self._transaction_repo
