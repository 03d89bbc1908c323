"""Value objects for the transactions domain."""

from fintrack.domain.transactions.value_objects.transaction_type import (
    TransactionType,
)

__all__ = ["TransactionType"]
