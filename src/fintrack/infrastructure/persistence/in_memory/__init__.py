"""In-process transaction store for the CLI, demos and tests."""

from fintrack.infrastructure.persistence.in_memory.factory import (
    InMemoryRepositoryFactory,
)
from fintrack.infrastructure.persistence.in_memory.transaction_repository import (
    InMemoryTransactionRepository,
)

__all__ = ["InMemoryRepositoryFactory", "InMemoryTransactionRepository"]
