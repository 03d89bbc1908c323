"""Unit tests for creating and deleting manual transactions."""

from datetime import date
from decimal import Decimal

import pytest

from fintrack.application.commands.transactions import (
    CreateTransactionCommand,
    DeleteTransactionCommand,
)
from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.exceptions import (
    InvalidTransactionError,
    TransactionNotFoundError,
)
from fintrack.domain.transactions.value_objects import TransactionType


@pytest.fixture
def create_command(repository):
    return CreateTransactionCommand(transaction_repository=repository)


class TestCreateTransactionCommand:
    @pytest.mark.asyncio
    async def test_creates_manual_transaction(self, create_command, repository):
        # Act
        stored = await create_command.execute(
            amount="12.50",
            description=" Lunch at Subway ",
            date="2024-12-05",
            category="Food & Dining",
        )

        # Assert
        assert stored.id == 1
        assert stored.amount == Decimal("12.50")
        assert stored.description == "Lunch at Subway"
        assert stored.date == date(2024, 12, 5)
        assert stored.category == Category.FOOD_AND_DINING
        assert stored.type == TransactionType.EXPENSE
        assert stored.imported is False
        assert stored.source_id == ""
        assert await repository.find_by_id(1) == stored

    @pytest.mark.asyncio
    async def test_income_with_category_enum(self, create_command):
        stored = await create_command.execute(
            amount=Decimal("2500"),
            description="Salary",
            date=date(2024, 12, 1),
            category=Category.INCOME,
            transaction_type="income",
            recurring=True,
        )

        assert stored.is_income
        assert stored.recurring is True

    @pytest.mark.asyncio
    async def test_reports_every_invalid_field(self, create_command, repository):
        with pytest.raises(InvalidTransactionError) as exc_info:
            await create_command.execute(
                amount="0",
                description="  ",
                date=None,
                category=None,
                transaction_type="transfer",
            )

        assert exc_info.value.errors == {
            "amount": "Amount must be greater than 0",
            "description": "Description is required",
            "date": "Date is required",
            "type": "Type must be 'income' or 'expense'",
            "category": "Category is required",
        }
        assert len(repository) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["abc", "-5", None, "", "NaN"])
    async def test_invalid_amounts(self, create_command, amount):
        with pytest.raises(InvalidTransactionError) as exc_info:
            await create_command.execute(
                amount=amount,
                description="x",
                date="2024-01-01",
                category="Other",
            )

        assert set(exc_info.value.errors) == {"amount"}

    @pytest.mark.asyncio
    async def test_bad_date_format(self, create_command):
        with pytest.raises(InvalidTransactionError) as exc_info:
            await create_command.execute(
                amount="1",
                description="x",
                date="05/12/2024",
                category="Other",
            )

        assert exc_info.value.errors == {"date": "Date must be in YYYY-MM-DD format"}

    @pytest.mark.asyncio
    async def test_unknown_category(self, create_command):
        with pytest.raises(InvalidTransactionError) as exc_info:
            await create_command.execute(
                amount="1",
                description="x",
                date="2024-01-01",
                category="Crypto",
            )

        assert exc_info.value.errors == {"category": "Unknown category 'Crypto'"}

    @pytest.mark.asyncio
    async def test_auto_categorize(self, create_command):
        stored = await create_command.execute(
            amount="30",
            description="Uber ride home",
            date="2024-01-01",
            auto_categorize=True,
        )

        assert stored.category == Category.TRANSPORTATION
        assert stored.imported is False

    @pytest.mark.asyncio
    async def test_explicit_category_wins_over_auto(self, create_command):
        stored = await create_command.execute(
            amount="30",
            description="Uber ride home",
            date="2024-01-01",
            category="Entertainment",
            auto_categorize=True,
        )

        assert stored.category == Category.ENTERTAINMENT


class TestDeleteTransactionCommand:
    @pytest.mark.asyncio
    async def test_delete(self, create_command, repository):
        stored = await create_command.execute(
            amount="1",
            description="x",
            date="2024-01-01",
            category="Other",
        )

        await DeleteTransactionCommand(repository).execute(stored.id)

        assert await repository.find_by_id(stored.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown(self, repository):
        with pytest.raises(TransactionNotFoundError) as exc_info:
            await DeleteTransactionCommand(repository).execute(42)

        assert exc_info.value.details == {"transaction_id": 42}
