"""Keyword rule mapping transaction text to a category."""

from __future__ import annotations

from dataclasses import dataclass

from fintrack.domain.categorization.value_objects.category import Category


@dataclass(frozen=True)
class CategoryRule:
    """A category together with the keywords that select it.

    A rule matches when any keyword occurs as a substring of the
    lower-cased description or the lower-cased merchant.
    """

    category: Category
    keywords: tuple[str, ...]

    def __post_init__(self):
        normalized = tuple(k.strip().lower() for k in self.keywords if k.strip())
        if not normalized:
            msg = f"Rule for {self.category.label} needs at least one keyword"
            raise ValueError(msg)
        object.__setattr__(self, "keywords", normalized)

    def matches(self, description: str, merchant: str = "") -> bool:
        return bool(self.matched_keywords(description, merchant))

    def matched_keywords(self, description: str, merchant: str = "") -> tuple[str, ...]:
        description = (description or "").lower()
        merchant = (merchant or "").lower()
        return tuple(
            keyword
            for keyword in self.keywords
            if keyword in description or keyword in merchant
        )

    def __str__(self) -> str:
        return f"CategoryRule[{self.category.label}]: {', '.join(self.keywords)}"
