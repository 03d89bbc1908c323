"""Repository interfaces for the transactions domain."""

from fintrack.domain.transactions.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = ["TransactionRepository"]
