"""Analytics queries."""

from fintrack.application.queries.analytics.spending_breakdown_query import (
    SpendingBreakdownQuery,
)

__all__ = ["SpendingBreakdownQuery"]
