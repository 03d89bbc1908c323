"""Category and classification schemas."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fintrack.domain.transactions.value_objects import TransactionType


class CategoryResponse(BaseModel):
    """A category with its presentation metadata."""

    key: str
    label: str
    icon: str
    color: str


class ClassifyRequest(BaseModel):
    """A raw description to classify."""

    description: str = ""
    merchant: str = ""
    amount: Decimal = Decimal("0")
    type: Optional[TransactionType] = None
    date: dt.date = Field(default_factory=dt.date.today)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "STARBUCKS #123",
                "merchant": "Starbucks",
                "amount": "-4.50",
            },
        },
    )


class ClassifyResponse(BaseModel):
    """The category and direction the classifier settled on."""

    category: str
    type: TransactionType
    matched_keywords: list[str] = Field(default_factory=list)
