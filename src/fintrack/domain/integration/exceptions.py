"""Integration domain exceptions.

Errors raised by the import workflow that bridges bank sources and the
transaction store: failed imports and illegal stage transitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fintrack.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    ErrorCode,
)

if TYPE_CHECKING:
    from fintrack.domain.integration.value_objects import ImportStage


class IntegrationError(DomainException):
    """Base exception for integration domain errors."""


class TransactionImportError(IntegrationError):
    """Raised when fetching or persisting fails after authentication.

    ``imported_count`` is the number of records created before the
    failure. Those records stay in the store; the caller restarts the
    whole workflow.
    """

    def __init__(
        self,
        reason: str,
        imported_count: int = 0,
        source_id: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=f"Import failed after {imported_count} transaction(s): {reason}",
            code=ErrorCode.IMPORT_FAILED,
            details={
                "reason": reason,
                "imported_count": imported_count,
                "source_id": source_id,
            },
        )
        self.reason = reason
        self.imported_count = imported_count


class InvalidImportStageTransitionError(BusinessRuleViolation):
    """Raised when the import workflow is driven out of order."""

    def __init__(self, current: ImportStage, target: ImportStage) -> None:
        super().__init__(
            message=(
                f"Cannot move import session from {current.value} to {target.value}"
            ),
            code=ErrorCode.INVALID_STAGE_TRANSITION,
            details={"current": current.value, "target": target.value},
        )
        self.current = current
        self.target = target


class ImportSessionAbandonedError(BusinessRuleViolation):
    """Raised to a late awaiter once the caller abandoned the session."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            message="Import session was abandoned",
            code=ErrorCode.IMPORT_SESSION_ABANDONED,
            details={"session_id": session_id},
        )


class ImportInProgressError(BusinessRuleViolation):
    """Raised when a new attempt starts while another is still in flight."""

    def __init__(self, source_id: str) -> None:
        super().__init__(
            message=f"An import from '{source_id}' is already in progress",
            code=ErrorCode.IMPORT_IN_PROGRESS,
            details={"source_id": source_id},
        )
