"""DTO for a completed transaction import."""

from dataclasses import dataclass, field
from datetime import datetime

from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.entities import StoredTransaction


@dataclass(frozen=True)
class ImportSummary:
    """Outcome of an import that reached the SUCCEEDED stage."""

    source_id: str
    imported_at: datetime
    transactions: list[StoredTransaction] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.transactions)

    @property
    def categories(self) -> list[Category]:
        return [tx.category for tx in self.transactions]

    def to_dict(self) -> dict:
        return {
            "source_id": self.source_id,
            "imported_at": self.imported_at.isoformat(),
            "count": self.count,
            "transactions": [
                tx.model_dump(mode="json") for tx in self.transactions
            ],
        }
