"""SQLAlchemy implementation of TransactionRepository."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.shared.time import ensure_tz_aware
from fintrack.domain.transactions.entities import (
    ClassifiedTransaction,
    StoredTransaction,
)
from fintrack.domain.transactions.exceptions import TransactionNotFoundError
from fintrack.domain.transactions.repositories import TransactionRepository
from fintrack.domain.transactions.value_objects import TransactionType
from fintrack.infrastructure.persistence.sqlalchemy.models import TransactionModel
from fintrack.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    ACCOUNT_TYPE_MAX_LENGTH,
    MERCHANT_MAX_LENGTH,
)

logger = logging.getLogger(__name__)


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """SQLAlchemy implementation of the transaction store.

    Writes are flushed, not committed; the caller owns the session and
    decides when to commit. Each insert runs in its own savepoint so a
    failed row leaves earlier rows of the same session intact.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, transaction: ClassifiedTransaction) -> StoredTransaction:
        model = TransactionModel()
        async with self._session.begin_nested():
            self._apply_to_model(model, transaction)
            self._session.add(model)
            await self._session.flush()
        await self._session.refresh(model)

        logger.debug(
            "Transaction created: %s (ID: %s)",
            transaction.description,
            model.id,
        )
        return self._map_to_domain(model)

    async def find_by_id(self, transaction_id: int) -> Optional[StoredTransaction]:
        model = await self._session.get(TransactionModel, transaction_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def list(self) -> List[StoredTransaction]:
        stmt = select(TransactionModel).order_by(
            TransactionModel.date.desc(),
            TransactionModel.id.desc(),
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def update(
        self,
        transaction_id: int,
        patch: Mapping[str, Any],
    ) -> StoredTransaction:
        model = await self._session.get(TransactionModel, transaction_id)
        if model is None:
            raise TransactionNotFoundError(transaction_id)

        updated = self._map_to_domain(model).with_changes(patch)
        self._apply_to_model(model, updated)
        await self._session.flush()
        await self._session.refresh(model)

        logger.info("Transaction updated (ID: %s)", transaction_id)
        return self._map_to_domain(model)

    async def delete(self, transaction_id: int) -> bool:
        model = await self._session.get(TransactionModel, transaction_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Transaction deleted (ID: %s)", transaction_id)
        return True

    @staticmethod
    def _apply_to_model(
        model: TransactionModel,
        transaction: ClassifiedTransaction,
    ) -> None:
        model.date = transaction.date
        model.amount = transaction.amount
        model.description = transaction.description
        model.merchant = transaction.merchant[:MERCHANT_MAX_LENGTH]
        model.account_type = transaction.account_type[:ACCOUNT_TYPE_MAX_LENGTH]
        model.category = transaction.category.value
        model.type = transaction.type.value
        model.imported = transaction.imported
        model.source_id = transaction.source_id
        model.recurring = transaction.recurring

    @staticmethod
    def _map_to_domain(model: TransactionModel) -> StoredTransaction:
        return StoredTransaction(
            id=model.id,
            created_at=ensure_tz_aware(model.created_at),
            date=model.date,
            amount=model.amount,
            description=model.description,
            merchant=model.merchant,
            account_type=model.account_type,
            category=Category(model.category),
            type=TransactionType(model.type),
            imported=model.imported,
            source_id=model.source_id,
            recurring=model.recurring,
        )
