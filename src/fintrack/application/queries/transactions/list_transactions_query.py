"""List stored transactions with optional filters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.entities import StoredTransaction
from fintrack.domain.transactions.repositories import TransactionRepository
from fintrack.domain.transactions.value_objects import TransactionType

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory


class ListTransactionsQuery:
    """List transactions newest first, filtered by origin, category or type."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
    ):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListTransactionsQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(
        self,
        imported: Optional[bool] = None,
        category: Optional[Category] = None,
        transaction_type: Optional[TransactionType] = None,
        limit: Optional[int] = None,
    ) -> list[StoredTransaction]:
        transactions = [
            tx
            for tx in await self._transaction_repo.list()
            if (imported is None or tx.imported == imported)
            and (category is None or tx.category == category)
            and (transaction_type is None or tx.type == transaction_type)
        ]
        if limit is not None:
            return transactions[:limit]
        return transactions
