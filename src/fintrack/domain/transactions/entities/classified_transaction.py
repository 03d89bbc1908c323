"""Classified and stored transaction models."""

import datetime as dt
from decimal import Decimal
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic import ValidationError as PydanticValidationError

from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.shared.time import utc_now
from fintrack.domain.transactions.exceptions import InvalidTransactionError
from fintrack.domain.transactions.value_objects import TransactionType


class ClassifiedTransaction(BaseModel):
    """A transaction with exactly one category and one direction.

    Amounts are unsigned; ``type`` carries the direction. ``imported`` and
    ``source_id`` tell pipeline output apart from manual entries.
    """

    date: dt.date
    amount: Decimal = Field(..., ge=0)
    description: str
    merchant: str = ""
    account_type: str = ""
    category: Category
    type: TransactionType
    imported: bool = False
    source_id: str = ""
    recurring: bool = False

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.is_income else -self.amount

    def __str__(self) -> str:
        sign = "+" if self.is_income else "-"
        return (
            f"{self.date}: {sign}{self.amount} [{self.category.label}] "
            f"- {self.description[:50]}"
        )


class StoredTransaction(ClassifiedTransaction):
    """A ClassifiedTransaction after the store assigned it an identifier."""

    id: int = Field(..., ge=1)
    created_at: dt.datetime = Field(default_factory=utc_now)

    @classmethod
    def from_classified(
        cls,
        transaction: ClassifiedTransaction,
        transaction_id: int,
    ) -> "StoredTransaction":
        return cls(id=transaction_id, **transaction.model_dump())

    def to_classified(self) -> ClassifiedTransaction:
        return ClassifiedTransaction(
            **self.model_dump(exclude={"id", "created_at"}),
        )

    def with_changes(self, patch: Mapping[str, Any]) -> "StoredTransaction":
        """Return a copy with ``patch`` applied; id and created_at are fixed.

        Raises
        ------
        InvalidTransactionError
            If the patch names an unknown field or yields an invalid value
        """
        editable = set(ClassifiedTransaction.model_fields)
        unknown = {key: f"Unknown field: {key}" for key in patch if key not in editable}
        if unknown:
            raise InvalidTransactionError(unknown)

        try:
            return StoredTransaction.model_validate({**self.model_dump(), **patch})
        except PydanticValidationError as e:
            errors = {
                ".".join(str(part) for part in err["loc"]): err["msg"]
                for err in e.errors()
            }
            raise InvalidTransactionError(errors) from e
