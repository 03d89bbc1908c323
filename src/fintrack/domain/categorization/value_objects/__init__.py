"""Value objects for the categorization domain."""

from fintrack.domain.categorization.value_objects.category import (
    CATEGORY_PRESENTATION,
    Category,
    CategoryPresentation,
)
from fintrack.domain.categorization.value_objects.category_rule import CategoryRule

__all__ = [
    "CATEGORY_PRESENTATION",
    "Category",
    "CategoryPresentation",
    "CategoryRule",
]
