"""Request and response schemas for the API."""

from fintrack.presentation.api.schemas.banks import BankSourceResponse
from fintrack.presentation.api.schemas.categories import (
    CategoryResponse,
    ClassifyRequest,
    ClassifyResponse,
)
from fintrack.presentation.api.schemas.imports import (
    ImportRequest,
    ImportSummaryResponse,
)
from fintrack.presentation.api.schemas.transactions import (
    CategorySpendingResponse,
    SpendingBreakdownResponse,
    TransactionCreateRequest,
    TransactionResponse,
)

__all__ = [
    "BankSourceResponse",
    "CategoryResponse",
    "CategorySpendingResponse",
    "ClassifyRequest",
    "ClassifyResponse",
    "ImportRequest",
    "ImportSummaryResponse",
    "SpendingBreakdownResponse",
    "TransactionCreateRequest",
    "TransactionResponse",
]
