"""Transactions domain exceptions."""

from fintrack.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class TransactionNotFoundError(EntityNotFoundError):
    """Raised when no stored transaction has the requested id."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(
            message=f"Transaction with ID {transaction_id} not found",
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            details={"transaction_id": transaction_id},
        )


class InvalidTransactionError(ValidationError):
    """Raised when a manually entered transaction fails validation.

    ``errors`` maps each offending field to its message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(
            message="; ".join(errors.values()),
            details={"errors": errors},
        )
        self.errors = errors
