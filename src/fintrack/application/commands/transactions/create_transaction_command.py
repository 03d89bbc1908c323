"""Create a manually entered transaction."""

from __future__ import annotations

import datetime as dt
import logging
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Optional, Union

from fintrack.domain.banking.value_objects import RawImportRecord
from fintrack.domain.categorization.exceptions import InvalidCategoryError
from fintrack.domain.categorization.services import TransactionClassifier
from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.entities import (
    ClassifiedTransaction,
    StoredTransaction,
)
from fintrack.domain.transactions.exceptions import InvalidTransactionError
from fintrack.domain.transactions.repositories import TransactionRepository
from fintrack.domain.transactions.value_objects import TransactionType

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

AmountInput = Union[Decimal, int, float, str, None]
DateInput = Union[dt.date, str, None]


class CreateTransactionCommand:
    """Validate form input and store it as a non-imported transaction."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        classifier: Optional[TransactionClassifier] = None,
    ):
        self._transaction_repo = transaction_repository
        self._classifier = classifier or TransactionClassifier()

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateTransactionCommand:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(  # NOQA: PLR0913
        self,
        amount: AmountInput,
        description: Optional[str],
        date: DateInput,
        category: Union[Category, str, None] = None,
        transaction_type: Union[TransactionType, str] = TransactionType.EXPENSE,
        merchant: str = "",
        account_type: str = "",
        recurring: bool = False,
        auto_categorize: bool = False,
    ) -> StoredTransaction:
        """
        Create a transaction from user input.

        Parameters
        ----------
        amount
            Positive amount; the direction comes from ``transaction_type``
        description
            Free text, must not be blank
        date
            Booking date or ISO string
        category
            Category or its label; may be omitted with ``auto_categorize``
        auto_categorize
            Derive a missing category with the rule-based classifier

        Returns
        -------
        The stored transaction with its new id

        Raises
        ------
        InvalidTransactionError
            With one message per invalid field
        """
        errors: dict[str, str] = {}

        parsed_amount = _parse_amount(amount)
        if parsed_amount is None or parsed_amount <= 0:
            errors["amount"] = "Amount must be greater than 0"

        if not description or not description.strip():
            errors["description"] = "Description is required"

        parsed_date: Optional[dt.date] = None
        if date is None or date == "":
            errors["date"] = "Date is required"
        else:
            parsed_date = _parse_date(date)
            if parsed_date is None:
                errors["date"] = "Date must be in YYYY-MM-DD format"

        try:
            parsed_type = TransactionType(transaction_type)
        except ValueError:
            errors["type"] = "Type must be 'income' or 'expense'"
            parsed_type = TransactionType.EXPENSE

        resolved_category: Optional[Category] = None
        if category:
            try:
                resolved_category = (
                    category
                    if isinstance(category, Category)
                    else Category.from_label(category)
                )
            except InvalidCategoryError as e:
                errors["category"] = e.message
        elif not auto_categorize:
            errors["category"] = "Category is required"

        if errors or parsed_amount is None or parsed_date is None:
            raise InvalidTransactionError(errors)

        if resolved_category is None:
            resolved_category = self._classifier.classify(
                RawImportRecord(
                    date=parsed_date,
                    amount=parsed_amount,
                    description=description or "",
                    merchant=merchant,
                    declared_type=parsed_type,
                ),
            )
            logger.debug(
                "Auto-categorized '%s' as %s",
                description,
                resolved_category.label,
            )

        transaction = ClassifiedTransaction(
            date=parsed_date,
            amount=parsed_amount,
            description=description or "",
            merchant=merchant,
            account_type=account_type,
            category=resolved_category,
            type=parsed_type,
            imported=False,
            source_id="",
            recurring=recurring,
        )
        return await self._transaction_repo.create(transaction)


def _parse_amount(value: AmountInput) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def _parse_date(value: Union[dt.date, str]) -> Optional[dt.date]:
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError:
        return None
