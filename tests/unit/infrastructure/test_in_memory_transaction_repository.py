"""Unit tests for the in-memory transaction store."""

from datetime import date
from decimal import Decimal

import pytest

from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.entities import ClassifiedTransaction
from fintrack.domain.transactions.exceptions import (
    InvalidTransactionError,
    TransactionNotFoundError,
)
from fintrack.domain.transactions.value_objects import TransactionType
from fintrack.infrastructure.persistence.in_memory import (
    InMemoryRepositoryFactory,
    InMemoryTransactionRepository,
)


def _tx(day: int, description: str = "Coffee") -> ClassifiedTransaction:
    return ClassifiedTransaction(
        date=date(2024, 3, day),
        amount=Decimal("4.50"),
        description=description,
        category=Category.FOOD_AND_DINING,
        type=TransactionType.EXPENSE,
    )


@pytest.fixture
def repository():
    return InMemoryTransactionRepository()


class TestInMemoryTransactionRepository:
    @pytest.mark.asyncio
    async def test_ids_are_monotonic_and_never_reused(self, repository):
        first = await repository.create(_tx(1))
        second = await repository.create(_tx(2))
        await repository.delete(second.id)
        third = await repository.create(_tx(3))

        assert (first.id, second.id, third.id) == (1, 2, 3)

    @pytest.mark.asyncio
    async def test_list_newest_date_first(self, repository):
        await repository.create(_tx(2, "b"))
        await repository.create(_tx(5, "c"))
        await repository.create(_tx(2, "d"))
        await repository.create(_tx(1, "a"))

        result = await repository.list()

        assert [tx.description for tx in result] == ["c", "d", "b", "a"]

    @pytest.mark.asyncio
    async def test_get_and_find(self, repository):
        stored = await repository.create(_tx(1))

        assert await repository.get(stored.id) == stored
        assert await repository.find_by_id(99) is None
        with pytest.raises(TransactionNotFoundError):
            await repository.get(99)

    @pytest.mark.asyncio
    async def test_update(self, repository):
        stored = await repository.create(_tx(1))

        updated = await repository.update(stored.id, {"category": Category.OTHER})

        assert updated.category == Category.OTHER
        assert (await repository.get(stored.id)).category == Category.OTHER

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, repository):
        with pytest.raises(TransactionNotFoundError):
            await repository.update(1, {"category": Category.OTHER})

    @pytest.mark.asyncio
    async def test_update_invalid_patch_leaves_record(self, repository):
        stored = await repository.create(_tx(1))

        with pytest.raises(InvalidTransactionError):
            await repository.update(stored.id, {"amount": "-1"})

        assert await repository.get(stored.id) == stored

    @pytest.mark.asyncio
    async def test_delete_reports_missing(self, repository):
        stored = await repository.create(_tx(1))

        assert await repository.delete(stored.id) is True
        assert await repository.delete(stored.id) is False
        assert len(repository) == 0

    def test_initial_records(self):
        repository = InMemoryTransactionRepository(initial=[_tx(1), _tx(2)])
        assert len(repository) == 2

    def test_factory_shares_repository(self):
        factory = InMemoryRepositoryFactory()
        assert factory.transaction_repository() is factory.transaction_repository()
