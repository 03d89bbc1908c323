"""Entities for the transactions domain."""

from fintrack.domain.transactions.entities.classified_transaction import (
    ClassifiedTransaction,
    StoredTransaction,
)

__all__ = ["ClassifiedTransaction", "StoredTransaction"]
