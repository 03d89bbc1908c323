"""DTOs for category spending totals."""

from dataclasses import dataclass, field
from decimal import Decimal

from fintrack.domain.categorization.value_objects import Category


@dataclass(frozen=True)
class CategorySpending:
    """Expense total for a single category."""

    category: Category
    amount: Decimal
    transaction_count: int
    percentage: Decimal


@dataclass(frozen=True)
class SpendingBreakdownResult:
    """Expense totals per category, largest first."""

    total: Decimal
    categories: list[CategorySpending] = field(default_factory=list)

    def amount_for(self, category: Category) -> Decimal:
        for item in self.categories:
            if item.category == category:
                return item.amount
        return Decimal("0")
