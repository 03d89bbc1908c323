"""Category vocabulary and its presentation metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fintrack.domain.categorization.exceptions import InvalidCategoryError


class Category(str, Enum):
    """Closed set of spending categories.

    The value is the user-facing label stored with each transaction.
    """

    FOOD_AND_DINING = "Food & Dining"
    TRANSPORTATION = "Transportation"
    GROCERIES = "Groceries"
    SHOPPING = "Shopping"
    BILLS_AND_UTILITIES = "Bills & Utilities"
    INCOME = "Income"
    HEALTHCARE = "Healthcare"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value

    @property
    def presentation(self) -> CategoryPresentation:
        return CATEGORY_PRESENTATION[self]

    @classmethod
    def from_label(cls, label: str) -> Category:
        """Look up a category by its label (case-insensitive).

        Raises
        ------
        InvalidCategoryError
            If the label is not in the vocabulary
        """
        normalized = (label or "").strip().lower()
        for category in cls:
            if category.value.lower() == normalized:
                return category
        raise InvalidCategoryError(label)


@dataclass(frozen=True)
class CategoryPresentation:
    """Icon and colour tokens used by clients to render a category."""

    icon: str
    color: str


CATEGORY_PRESENTATION: dict[Category, CategoryPresentation] = {
    Category.FOOD_AND_DINING: CategoryPresentation(
        "Utensils",
        "bg-orange-100 text-orange-600",
    ),
    Category.TRANSPORTATION: CategoryPresentation(
        "Car",
        "bg-blue-100 text-blue-600",
    ),
    Category.GROCERIES: CategoryPresentation(
        "ShoppingCart",
        "bg-emerald-100 text-emerald-600",
    ),
    Category.SHOPPING: CategoryPresentation(
        "ShoppingBag",
        "bg-purple-100 text-purple-600",
    ),
    Category.BILLS_AND_UTILITIES: CategoryPresentation(
        "Receipt",
        "bg-yellow-100 text-yellow-600",
    ),
    Category.INCOME: CategoryPresentation(
        "TrendingUp",
        "bg-success-100 text-success-600",
    ),
    Category.HEALTHCARE: CategoryPresentation(
        "Heart",
        "bg-red-100 text-red-600",
    ),
    Category.ENTERTAINMENT: CategoryPresentation(
        "Music",
        "bg-pink-100 text-pink-600",
    ),
    Category.OTHER: CategoryPresentation(
        "MoreHorizontal",
        "bg-gray-100 text-gray-600",
    ),
}

_unmapped = [c.name for c in Category if c not in CATEGORY_PRESENTATION]
if _unmapped:
    msg = f"Categories without presentation metadata: {', '.join(_unmapped)}"
    raise RuntimeError(msg)
