"""Transaction direction enumeration."""

from enum import Enum


class TransactionType(str, Enum):
    """Whether money came in or went out.

    Amounts are stored unsigned; the direction lives here.
    """

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_signed_amount(cls, amount) -> "TransactionType":
        return cls.INCOME if amount > 0 else cls.EXPENSE

    def is_income(self) -> bool:
        return self == TransactionType.INCOME
