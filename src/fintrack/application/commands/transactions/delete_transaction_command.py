"""Delete a stored transaction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fintrack.domain.transactions.exceptions import TransactionNotFoundError
from fintrack.domain.transactions.repositories import TransactionRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteTransactionCommand:
    """Delete a transaction, manual or imported."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
    ):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteTransactionCommand:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, transaction_id: int) -> None:
        deleted = await self._transaction_repo.delete(transaction_id)
        if not deleted:
            raise TransactionNotFoundError(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)
