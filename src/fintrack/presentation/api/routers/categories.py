"""Categories router: vocabulary and ad-hoc classification."""

from fastapi import APIRouter

from fintrack.domain.banking.value_objects import RawImportRecord
from fintrack.domain.categorization.services import (
    TransactionClassifier,
    infer_type,
)
from fintrack.domain.categorization.value_objects import Category
from fintrack.presentation.api.schemas import (
    CategoryResponse,
    ClassifyRequest,
    ClassifyResponse,
)

router = APIRouter()

_classifier = TransactionClassifier()


@router.get("", summary="List categories")
async def list_categories() -> list[CategoryResponse]:
    return [
        CategoryResponse(
            key=category.name,
            label=category.label,
            icon=category.presentation.icon,
            color=category.presentation.color,
        )
        for category in Category
    ]


@router.post("/classify", summary="Classify a transaction description")
async def classify_description(request: ClassifyRequest) -> ClassifyResponse:
    """
    Run the rule-based classifier on a single description.

    Nothing is stored. ``matched_keywords`` is empty when the fallback
    category was used.
    """
    record = RawImportRecord(
        date=request.date,
        amount=request.amount,
        description=request.description,
        merchant=request.merchant,
        declared_type=request.type,
    )
    rule = _classifier.match_rule(record)
    return ClassifyResponse(
        category=_classifier.classify(record).label,
        type=infer_type(record),
        matched_keywords=(
            list(rule.matched_keywords(record.description, record.merchant))
            if rule
            else []
        ),
    )
