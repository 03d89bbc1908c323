"""Unit tests for classified and stored transaction models."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.entities import (
    ClassifiedTransaction,
    StoredTransaction,
)
from fintrack.domain.transactions.exceptions import InvalidTransactionError
from fintrack.domain.transactions.value_objects import TransactionType


@pytest.fixture
def classified():
    return ClassifiedTransaction(
        date=date(2024, 3, 1),
        amount=Decimal("12.50"),
        description="Lunch",
        category=Category.FOOD_AND_DINING,
        type=TransactionType.EXPENSE,
    )


class TestClassifiedTransaction:
    def test_defaults_mark_manual_entry(self, classified):
        assert classified.imported is False
        assert classified.source_id == ""
        assert classified.recurring is False

    def test_negative_amount_rejected(self):
        with pytest.raises(PydanticValidationError):
            ClassifiedTransaction(
                date=date(2024, 3, 1),
                amount=Decimal("-1"),
                description="x",
                category=Category.OTHER,
                type=TransactionType.EXPENSE,
            )

    def test_signed_amount(self, classified):
        assert classified.signed_amount == Decimal("-12.50")
        assert classified.is_expense
        assert not classified.is_income


class TestStoredTransaction:
    def test_from_classified_keeps_fields(self, classified):
        stored = StoredTransaction.from_classified(classified, 7)

        assert stored.id == 7
        assert stored.created_at.tzinfo is not None
        assert stored.to_classified() == classified

    def test_with_changes(self, classified):
        stored = StoredTransaction.from_classified(classified, 1)
        updated = stored.with_changes(
            {"category": Category.OTHER, "amount": Decimal("3")},
        )

        assert updated.id == 1
        assert updated.created_at == stored.created_at
        assert updated.category == Category.OTHER
        assert updated.amount == Decimal("3")
        assert stored.category == Category.FOOD_AND_DINING

    def test_with_changes_rejects_unknown_and_fixed_fields(self, classified):
        stored = StoredTransaction.from_classified(classified, 1)

        with pytest.raises(InvalidTransactionError) as exc_info:
            stored.with_changes({"id": 99, "colour": "red"})

        assert set(exc_info.value.errors) == {"id", "colour"}

    def test_with_changes_rejects_invalid_value(self, classified):
        stored = StoredTransaction.from_classified(classified, 1)

        with pytest.raises(InvalidTransactionError) as exc_info:
            stored.with_changes({"amount": "-5"})

        assert "amount" in exc_info.value.errors
