"""Transaction schemas for API request/response models."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from fintrack.application.dtos.analytics import SpendingBreakdownResult
from fintrack.domain.transactions.entities import StoredTransaction
from fintrack.domain.transactions.value_objects import TransactionType


class TransactionResponse(BaseModel):
    """A stored transaction; ``amount`` is unsigned, ``type`` the direction."""

    id: int
    date: dt.date
    amount: Decimal
    description: str
    merchant: str
    account_type: str
    category: str
    type: TransactionType
    imported: bool
    source_id: str
    recurring: bool
    created_at: dt.datetime

    @classmethod
    def from_domain(cls, tx: StoredTransaction) -> "TransactionResponse":
        return cls(
            id=tx.id,
            date=tx.date,
            amount=tx.amount,
            description=tx.description,
            merchant=tx.merchant,
            account_type=tx.account_type,
            category=tx.category.label,
            type=tx.type,
            imported=tx.imported,
            source_id=tx.source_id,
            recurring=tx.recurring,
            created_at=tx.created_at,
        )


class TransactionCreateRequest(BaseModel):
    """A manually entered transaction.

    Field checks (positive amount, required description, date and
    category) are done by the command so all problems are reported
    together.
    """

    amount: Optional[Decimal] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    category: Optional[str] = None
    type: TransactionType = TransactionType.EXPENSE
    merchant: str = ""
    account_type: str = ""
    recurring: bool = False
    auto_categorize: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "12.50",
                "description": "Lunch at Subway",
                "date": "2024-12-05",
                "category": "Food & Dining",
                "type": "expense",
            },
        },
    )


class CategorySpendingResponse(BaseModel):
    category: str
    amount: Decimal
    transaction_count: int
    percentage: Decimal


class SpendingBreakdownResponse(BaseModel):
    """Expense totals per category, largest first."""

    total: Decimal
    categories: list[CategorySpendingResponse]

    @classmethod
    def from_result(
        cls,
        result: SpendingBreakdownResult,
    ) -> "SpendingBreakdownResponse":
        return cls(
            total=result.total,
            categories=[
                CategorySpendingResponse(
                    category=item.category.label,
                    amount=item.amount,
                    transaction_count=item.transaction_count,
                    percentage=item.percentage,
                )
                for item in result.categories
            ],
        )
