"""Expense totals per category."""

from __future__ import annotations

from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from fintrack.application.dtos.analytics import (
    CategorySpending,
    SpendingBreakdownResult,
)
from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.repositories import TransactionRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

_CENT = Decimal("0.01")


class SpendingBreakdownQuery:
    """Return spending breakdown by category, largest total first."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
    ):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SpendingBreakdownQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, imported_only: bool = False) -> SpendingBreakdownResult:
        totals: dict[Category, Decimal] = defaultdict(Decimal)
        counts: dict[Category, int] = defaultdict(int)

        for tx in await self._transaction_repo.list():
            if not tx.is_expense:
                continue
            if imported_only and not tx.imported:
                continue
            totals[tx.category] += tx.amount
            counts[tx.category] += 1

        total = sum(totals.values(), Decimal("0"))
        categories = [
            CategorySpending(
                category=category,
                amount=amount,
                transaction_count=counts[category],
                percentage=_percentage(amount, total),
            )
            for category, amount in totals.items()
        ]
        # Ties fall back to enum order
        order = list(Category)
        categories.sort(key=lambda c: (-c.amount, order.index(c.category)))

        return SpendingBreakdownResult(total=total, categories=categories)


def _percentage(amount: Decimal, total: Decimal) -> Decimal:
    if total == 0:
        return Decimal("0.00")
    return (amount / total * 100).quantize(_CENT, rounding=ROUND_HALF_UP)
