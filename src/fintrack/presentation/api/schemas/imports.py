"""Bank import schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fintrack.presentation.api.schemas.transactions import TransactionResponse


class ImportRequest(BaseModel):
    """Source and credentials for a connect-and-import run.

    Credentials are only used for the login and never echoed back.
    """

    source_id: str
    username: str = ""
    password: str = Field(default="", repr=False)
    account_number: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "source_id": "chase",
                "username": "jane",
                "password": "********",
            },
        },
    )


class ImportSummaryResponse(BaseModel):
    """Outcome of a successful import."""

    source_id: str
    imported_at: datetime
    count: int
    categories: list[str]
    transactions: list[TransactionResponse]
