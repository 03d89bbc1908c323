"""Raw import record value object."""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from fintrack.domain.transactions.value_objects import TransactionType


class RawImportRecord(BaseModel):
    """Unclassified transaction candidate as delivered by a bank source.

    ``amount`` may be signed (positive = money in) or unsigned with an
    explicit ``declared_type``. When both are present the declared type
    wins.
    """

    date: dt.date = Field(..., description="Booking date")
    amount: Decimal = Field(..., description="Signed or unsigned amount")
    description: str = Field(..., description="Line-item label, may be blank")
    merchant: str = Field(default="", description="Free text, any length")
    account_type: str = Field(
        default="",
        validation_alias=AliasChoices("account_type", "accountType"),
    )
    declared_type: Optional[TransactionType] = Field(
        default=None,
        validation_alias=AliasChoices("declared_type", "declaredType", "type"),
    )

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    @field_validator("description", "merchant", "account_type", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def effective_type(self) -> TransactionType:
        if self.declared_type is not None:
            return self.declared_type
        return TransactionType.from_signed_amount(self.amount)

    def __str__(self) -> str:
        return f"{self.date}: {self.amount} - {self.description[:50]}"
