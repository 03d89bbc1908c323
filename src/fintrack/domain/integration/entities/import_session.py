"""Import session entity tracking one connect-and-import attempt."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from fintrack.domain.banking.value_objects import BankCredentials
from fintrack.domain.integration.exceptions import (
    ImportSessionAbandonedError,
    InvalidImportStageTransitionError,
)
from fintrack.domain.integration.value_objects import ImportStage
from fintrack.domain.shared.time import utc_now


class ImportSession:
    """
    Ephemeral state of one user-initiated import attempt.

    Lifecycle:
    - Created at SELECTING when the user picks a source and enters
      credentials
    - Moved through AUTHENTICATING and IMPORTING by the orchestrator only
    - Ends in SUCCEEDED or FAILED; a retry always starts a new session

    Credentials are dropped as soon as authentication resolves, and an
    abandoned session refuses every further transition.
    """

    def __init__(
        self,
        source_id: str,
        credentials: Optional[BankCredentials] = None,
        id: Optional[UUID] = None,
    ):
        self._id = id or uuid4()
        self._source_id = source_id
        self._credentials = credentials
        self._stage = ImportStage.SELECTING
        self._connection_id: Optional[str] = None
        self._accounts_found = 0
        self._created_count = 0
        self._result_count: Optional[int] = None
        self._failure_reason: Optional[str] = None
        self._abandoned = False
        self._created_at = utc_now()
        self._updated_at = self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def credentials(self) -> Optional[BankCredentials]:
        return self._credentials

    @property
    def stage(self) -> ImportStage:
        return self._stage

    @property
    def connection_id(self) -> Optional[str]:
        return self._connection_id

    @property
    def accounts_found(self) -> int:
        return self._accounts_found

    @property
    def created_count(self) -> int:
        """Records persisted so far in the IMPORTING stage."""
        return self._created_count

    @property
    def result_count(self) -> Optional[int]:
        return self._result_count

    @property
    def failure_reason(self) -> Optional[str]:
        return self._failure_reason

    @property
    def is_abandoned(self) -> bool:
        return self._abandoned

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _transition(self, target: ImportStage) -> None:
        if self._abandoned:
            raise ImportSessionAbandonedError(str(self._id))
        if not self._stage.can_transition_to(target):
            raise InvalidImportStageTransitionError(self._stage, target)
        self._stage = target
        self._updated_at = utc_now()

    def begin_authentication(self) -> None:
        self._transition(ImportStage.AUTHENTICATING)

    def mark_authenticated(
        self,
        connection_id: Optional[str],
        accounts_found: int = 0,
    ) -> None:
        self._transition(ImportStage.IMPORTING)
        self._connection_id = connection_id
        self._accounts_found = accounts_found
        self._credentials = None

    def record_created(self) -> None:
        if self._abandoned:
            raise ImportSessionAbandonedError(str(self._id))
        if self._stage != ImportStage.IMPORTING:
            raise InvalidImportStageTransitionError(self._stage, ImportStage.IMPORTING)
        self._created_count += 1
        self._updated_at = utc_now()

    def mark_succeeded(self) -> None:
        self._transition(ImportStage.SUCCEEDED)
        self._result_count = self._created_count

    def mark_failed(self, reason: str) -> None:
        if not reason or not reason.strip():
            msg = "Failure reason cannot be empty"
            raise ValueError(msg)
        self._transition(ImportStage.FAILED)
        self._failure_reason = reason.strip()
        self._credentials = None

    def abandon(self) -> None:
        """Detach the caller; late results for this session are discarded."""
        self._abandoned = True
        self._credentials = None
        self._updated_at = utc_now()

    def __eq__(self, other) -> bool:
        if not isinstance(other, ImportSession):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"ImportSession(id={self._id}, source_id={self._source_id!r}, "
            f"stage={self._stage.value}, created={self._created_count}, "
            f"abandoned={self._abandoned})"
        )

    def __str__(self) -> str:
        return f"ImportSession[{self._stage.value}]: {self._source_id}"
