"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses in one place so every
endpoint answers errors the same way.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fintrack.domain.banking.exceptions import (
    BankAuthenticationError,
    BankingDomainError,
)
from fintrack.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CATEGORY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_BANK_SOURCE: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TRANSACTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - another import is running
    ErrorCode.IMPORT_IN_PROGRESS: status.HTTP_409_CONFLICT,
    # 422 Unprocessable Entity - business rule violations
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_STAGE_TRANSITION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.IMPORT_SESSION_ABANDONED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # 401 Unauthorized - bank refused the login
    ErrorCode.BANK_AUTHENTICATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    # 503 Service Unavailable - external service errors
    ErrorCode.BANK_CONNECTION_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.BANK_TRANSACTION_FETCH_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.IMPORT_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, BusinessRuleViolation):
        return status.HTTP_422_UNPROCESSABLE_ENTITY

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(BankingDomainError)
    async def banking_exception_handler(
        request: Request,
        exc: BankingDomainError,
    ) -> JSONResponse:
        """Handle banking errors.

        Refused logins keep their human-readable reason so the user knows
        whether retrying makes sense.
        """
        if isinstance(exc, BankAuthenticationError):
            logger.warning(
                "Bank authentication failed on %s %s: %s",
                request.method,
                request.url.path,
                exc.reason.value,
            )
            return _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=exc.message,
                code=ErrorCode.BANK_AUTHENTICATION_FAILED.value,
            )

        status_code = get_status_for_exception(exc)
        logger.warning(
            "Banking error on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
        )
        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all so clients always receive the same error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
