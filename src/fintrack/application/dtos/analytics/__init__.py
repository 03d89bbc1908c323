"""DTOs for analytics queries."""

from fintrack.application.dtos.analytics.spending_breakdown import (
    CategorySpending,
    SpendingBreakdownResult,
)

__all__ = ["CategorySpending", "SpendingBreakdownResult"]
