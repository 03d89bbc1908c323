"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Protocol

from fintrack.domain.transactions.repositories import TransactionRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...
