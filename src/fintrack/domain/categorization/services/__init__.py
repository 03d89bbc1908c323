"""Domain services for categorization."""

from fintrack.domain.categorization.services.transaction_classifier import (
    DEFAULT_CATEGORY_RULES,
    TransactionClassifier,
    classify,
    infer_type,
)

__all__ = [
    "DEFAULT_CATEGORY_RULES",
    "TransactionClassifier",
    "classify",
    "infer_type",
]
