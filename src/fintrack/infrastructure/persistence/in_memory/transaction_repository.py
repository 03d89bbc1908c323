"""In-memory implementation of TransactionRepository."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, List, Mapping, Optional

from fintrack.domain.transactions.entities import (
    ClassifiedTransaction,
    StoredTransaction,
)
from fintrack.domain.transactions.exceptions import TransactionNotFoundError
from fintrack.domain.transactions.repositories import TransactionRepository

logger = logging.getLogger(__name__)


class InMemoryTransactionRepository(TransactionRepository):
    """Dictionary-backed store owned by a single instance.

    Ids start at 1 and are never reused, even after a delete.
    """

    def __init__(self, initial: Optional[Iterable[ClassifiedTransaction]] = None):
        self._items: dict[int, StoredTransaction] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
        for transaction in initial or ():
            self._store(transaction)

    def __len__(self) -> int:
        return len(self._items)

    async def create(self, transaction: ClassifiedTransaction) -> StoredTransaction:
        async with self._lock:
            stored = self._store(transaction)
        logger.debug("Transaction created: %s (ID: %s)", stored.description, stored.id)
        return stored

    async def find_by_id(self, transaction_id: int) -> Optional[StoredTransaction]:
        return self._items.get(transaction_id)

    async def list(self) -> List[StoredTransaction]:
        return sorted(
            self._items.values(),
            key=lambda tx: (tx.date, tx.id),
            reverse=True,
        )

    async def update(
        self,
        transaction_id: int,
        patch: Mapping[str, Any],
    ) -> StoredTransaction:
        async with self._lock:
            current = self._items.get(transaction_id)
            if current is None:
                raise TransactionNotFoundError(transaction_id)
            updated = current.with_changes(patch)
            self._items[transaction_id] = updated
        return updated

    async def delete(self, transaction_id: int) -> bool:
        async with self._lock:
            return self._items.pop(transaction_id, None) is not None

    def _store(self, transaction: ClassifiedTransaction) -> StoredTransaction:
        stored = StoredTransaction.from_classified(transaction, self._next_id)
        self._items[stored.id] = stored
        self._next_id += 1
        return stored
