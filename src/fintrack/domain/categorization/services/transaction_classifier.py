"""Rule-based transaction classifier.

Assigns one category to a raw record by walking an ordered list of
keyword rules. The first rule with a keyword found in the description or
the merchant wins; order is the only tie-breaker. Records no rule matches
fall back to "Income" for money coming in and "Other" otherwise.

The classifier is pure: no I/O, no state between calls, and it never
raises for a well-formed record.
"""

from __future__ import annotations

from typing import Optional, Sequence

from fintrack.domain.banking.value_objects import RawImportRecord
from fintrack.domain.categorization.value_objects import Category, CategoryRule
from fintrack.domain.transactions.entities import ClassifiedTransaction
from fintrack.domain.transactions.value_objects import TransactionType

# Order matters: earlier rules take priority over later ones.
DEFAULT_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        Category.FOOD_AND_DINING,
        (
            "starbucks",
            "mcdonalds",
            "subway",
            "restaurant",
            "cafe",
            "pizza",
            "burger",
        ),
    ),
    CategoryRule(
        Category.TRANSPORTATION,
        ("shell", "exxon", "chevron", "gas", "uber", "lyft", "taxi", "parking"),
    ),
    CategoryRule(
        Category.GROCERIES,
        (
            "whole foods",
            "safeway",
            "kroger",
            "walmart",
            "grocery",
            "supermarket",
        ),
    ),
    CategoryRule(
        Category.SHOPPING,
        ("amazon", "target", "best buy", "apple", "store", "purchase"),
    ),
    CategoryRule(
        Category.BILLS_AND_UTILITIES,
        (
            "rent",
            "mortgage",
            "property",
            "utilities",
            "electric",
            "water",
            "internet",
        ),
    ),
    CategoryRule(
        Category.INCOME,
        ("payroll", "salary", "deposit", "income", "refund", "cashback"),
    ),
    CategoryRule(
        Category.HEALTHCARE,
        ("pharmacy", "doctor", "hospital", "medical", "health", "dental"),
    ),
    CategoryRule(
        Category.ENTERTAINMENT,
        (
            "netflix",
            "spotify",
            "movie",
            "theater",
            "entertainment",
            "subscription",
        ),
    ),
)


class TransactionClassifier:
    """Classify raw records with an ordered rule table."""

    def __init__(self, rules: Optional[Sequence[CategoryRule]] = None):
        self._rules: tuple[CategoryRule, ...] = (
            tuple(rules) if rules is not None else DEFAULT_CATEGORY_RULES
        )

    @property
    def rules(self) -> tuple[CategoryRule, ...]:
        return self._rules

    def match_rule(self, record: RawImportRecord) -> Optional[CategoryRule]:
        for rule in self._rules:
            if rule.matches(record.description, record.merchant):
                return rule
        return None

    def classify(self, record: RawImportRecord) -> Category:
        rule = self.match_rule(record)
        if rule is not None:
            return rule.category
        return self.fallback_category(record)

    @staticmethod
    def fallback_category(record: RawImportRecord) -> Category:
        if infer_type(record) == TransactionType.INCOME:
            return Category.INCOME
        return Category.OTHER

    def classify_record(
        self,
        record: RawImportRecord,
        source_id: str = "",
    ) -> ClassifiedTransaction:
        """Turn a raw record into a transaction ready for the store.

        The amount is stored unsigned; a signed input's direction moves into
        ``type``. A non-empty ``source_id`` marks the result as imported.
        """
        return ClassifiedTransaction(
            date=record.date,
            amount=abs(record.amount),
            description=record.description,
            merchant=record.merchant,
            account_type=record.account_type,
            category=self.classify(record),
            type=infer_type(record),
            imported=bool(source_id),
            source_id=source_id,
        )


def infer_type(record: RawImportRecord) -> TransactionType:
    """Declared type if present, otherwise derived from the amount sign."""
    return record.effective_type()


_default_classifier = TransactionClassifier()


def classify(record: RawImportRecord) -> Category:
    """Classify with the default rule table."""
    return _default_classifier.classify(record)
