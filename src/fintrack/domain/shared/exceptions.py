"""Shared domain exceptions and error codes.

Every error raised by the domain and application layers derives from
DomainException so the presentation layer can turn it into a consistent
response (HTTP body or CLI message) from a single place.

Hierarchy:
    DomainException
    ├── ValidationError          input rejected before any external call
    ├── BusinessRuleViolation    workflow driven out of order
    ├── EntityNotFoundError      unknown transaction id
    ├── BankingDomainError       (banking.exceptions) bank source problems
    └── IntegrationError         (integration.exceptions) failed imports

The API maps ``ErrorCode`` to an HTTP status in
``presentation.api.exception_handlers``; the CLI prints ``message``.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    The comment above each group names the HTTP status it is served with.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS_FORMAT = "INVALID_CREDENTIALS_FORMAT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    UNKNOWN_BANK_SOURCE = "UNKNOWN_BANK_SOURCE"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"

    # Conflict Errors (409)
    IMPORT_IN_PROGRESS = "IMPORT_IN_PROGRESS"

    # Business Rule Violations (422)
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    INVALID_STAGE_TRANSITION = "INVALID_STAGE_TRANSITION"
    IMPORT_SESSION_ABANDONED = "IMPORT_SESSION_ABANDONED"

    # Banking Errors (401/503)
    BANK_CONNECTION_FAILED = "BANK_CONNECTION_FAILED"
    BANK_AUTHENTICATION_FAILED = "BANK_AUTHENTICATION_FAILED"
    BANK_TRANSACTION_FETCH_FAILED = "BANK_TRANSACTION_FETCH_FAILED"
    IMPORT_FAILED = "IMPORT_FAILED"

    # General Errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Carries everything a surface needs to report the failure without
    inspecting the concrete type: a user-safe message, a stable code and
    a details dict for logs.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users).
        Never put credentials here; use SecureString values or masked
        account numbers instead.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails before any external call.

    Examples are a missing bank selection, blank credentials or a manual
    transaction without an amount. Nothing has been sent to a bank or
    written to the store when this is raised, so the caller can fix the
    input and try again.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class BusinessRuleViolation(DomainException):
    """Raised when a business rule or domain invariant is violated.

    In this domain that mostly means the import workflow was driven out of
    order: importing before connecting, touching an abandoned session, or
    starting a second attempt while one is in flight.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found.

    Subclasses put the missing identifier into ``details`` so it shows up
    in logs without being echoed to the client.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
