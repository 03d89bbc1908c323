"""Transaction queries."""

from fintrack.application.queries.transactions.list_transactions_query import (
    ListTransactionsQuery,
)

__all__ = ["ListTransactionsQuery"]
