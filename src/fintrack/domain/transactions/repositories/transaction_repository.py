"""Transaction repository interface.

Defines the contract for the transaction store. Identifiers are assigned
by the store, increase monotonically and are never reused.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from fintrack.domain.transactions.entities import (
    ClassifiedTransaction,
    StoredTransaction,
)
from fintrack.domain.transactions.exceptions import TransactionNotFoundError


class TransactionRepository(ABC):
    """Repository interface for classified transactions."""

    @abstractmethod
    async def create(self, transaction: ClassifiedTransaction) -> StoredTransaction:
        """Persist a transaction and return it with its new id."""

    @abstractmethod
    async def find_by_id(self, transaction_id: int) -> Optional[StoredTransaction]:
        """Find transaction by ID."""

    async def get(self, transaction_id: int) -> StoredTransaction:
        """Return the transaction or raise TransactionNotFoundError."""
        stored = await self.find_by_id(transaction_id)
        if stored is None:
            raise TransactionNotFoundError(transaction_id)
        return stored

    @abstractmethod
    async def list(self) -> List[StoredTransaction]:
        """List all transactions, newest date first."""

    @abstractmethod
    async def update(
        self,
        transaction_id: int,
        patch: Mapping[str, Any],
    ) -> StoredTransaction:
        """Apply a partial update.

        Raises
        ------
        TransactionNotFoundError
            If the id is unknown
        """

    @abstractmethod
    async def delete(self, transaction_id: int) -> bool:
        """Delete a transaction. Returns False if it did not exist."""
