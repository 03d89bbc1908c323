"""Shared domain components.

Exports the exception hierarchy, error codes and time helpers used across
domain boundaries.
"""

from fintrack.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from fintrack.domain.shared.time import today_utc, utc_now

__all__ = [
    "BusinessRuleViolation",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "today_utc",
    "utc_now",
]
