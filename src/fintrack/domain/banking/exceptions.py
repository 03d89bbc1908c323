"""Banking domain exceptions.

Errors raised while talking to a bank source: connection problems,
refused logins and failed record fetches, plus the local validation
errors raised before any request is made.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fintrack.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

if TYPE_CHECKING:
    from fintrack.domain.banking.value_objects.authentication_result import (
        AuthFailureReason,
    )

# =============================================================================
# Base Banking Exception
# =============================================================================


class BankingDomainError(DomainException):
    """Base exception for banking domain errors."""


# =============================================================================
# Connection Exceptions
# =============================================================================


class BankConnectionError(BankingDomainError):
    """Raised when a bank source cannot be reached.

    Use BankAuthenticationError when the bank answered but refused the
    login.
    """

    def __init__(
        self,
        message: str = "Failed to connect to bank",
        source_id: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.BANK_CONNECTION_FAILED,
            details={"source_id": source_id} if source_id else None,
        )


class BankAuthenticationError(BankConnectionError):
    """Raised when the bank refuses the login.

    The caller may fix the credentials and call ``connect`` again.
    """

    def __init__(
        self,
        reason: AuthFailureReason,
        source_id: Optional[str] = None,
    ) -> None:
        super().__init__(message=reason.message, source_id=source_id)
        self.code = ErrorCode.BANK_AUTHENTICATION_FAILED
        self.reason = reason
        self.details["reason"] = reason.value

    @property
    def is_retryable(self) -> bool:
        return self.reason.is_retryable()


class BankTransactionFetchError(BankingDomainError):
    """Raised when fetching raw records from the bank fails."""

    def __init__(
        self,
        message: str = "Failed to fetch transactions from bank",
        source_id: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.BANK_TRANSACTION_FETCH_FAILED,
            details={"source_id": source_id, "reason": reason},
        )


# =============================================================================
# Local Validation Exceptions
# =============================================================================


class InvalidCredentialsFormatError(ValidationError):
    """Raised when credentials are missing or malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Invalid credentials: {reason}",
            code=ErrorCode.INVALID_CREDENTIALS_FORMAT,
            details={"reason": reason},
        )


class UnknownBankSourceError(ValidationError):
    """Raised when no bank source is selected or the id is not supported."""

    def __init__(self, source_id: Optional[str]) -> None:
        message = (
            f"Bank source '{source_id}' is not supported"
            if source_id
            else "Please select a bank"
        )
        super().__init__(
            message=message,
            code=ErrorCode.UNKNOWN_BANK_SOURCE,
            details={"source_id": source_id},
        )
