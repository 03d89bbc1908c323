"""Staged connect-and-import workflow for bank sources.

Drives one ImportSession through SELECTING -> AUTHENTICATING -> IMPORTING
-> SUCCEEDED/FAILED. Every call to an external collaborator is bounded by
a timeout, and a session abandoned by the caller never mutates again:
whatever resolves afterwards is discarded.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from fintrack.application.dtos.integration import ConnectionResult, ImportSummary
from fintrack.domain.banking.exceptions import (
    BankAuthenticationError,
    BankConnectionError,
    InvalidCredentialsFormatError,
    UnknownBankSourceError,
)
from fintrack.domain.banking.value_objects import (
    SUPPORTED_BANK_SOURCES,
    AuthenticationResult,
    AuthFailureReason,
    BankCredentials,
    BankSource,
    find_bank_source,
)
from fintrack.domain.categorization.services import TransactionClassifier
from fintrack.domain.integration.entities import ImportSession
from fintrack.domain.integration.exceptions import (
    ImportInProgressError,
    ImportSessionAbandonedError,
    InvalidImportStageTransitionError,
    TransactionImportError,
)
from fintrack.domain.integration.value_objects import ImportStage
from fintrack.domain.shared.exceptions import BusinessRuleViolation
from fintrack.domain.shared.time import utc_now
from fintrack.domain.transactions.entities import StoredTransaction
from fintrack.infrastructure.banking import SimulatedBankAdapter
from fintrack_config import get_settings

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory
    from fintrack.domain.banking.ports import BankConnectionPort
    from fintrack.domain.banking.value_objects import RawImportRecord
    from fintrack.domain.transactions.repositories import TransactionRepository
    from fintrack_config import Settings

logger = logging.getLogger(__name__)


class BankImportOrchestrator:
    """Connect to a bank source and import its transactions.

    One orchestrator drives at most one active session. ``connect`` always
    starts a fresh session, so retrying after a refused login is just
    another ``connect`` call.
    """

    def __init__(  # noqa: PLR0913
        self,
        bank_connection: BankConnectionPort,
        transaction_repository: TransactionRepository,
        classifier: Optional[TransactionClassifier] = None,
        auth_timeout_seconds: float = 10.0,
        import_timeout_seconds: float = 30.0,
        sources: tuple[BankSource, ...] = SUPPORTED_BANK_SOURCES,
    ):
        self._bank = bank_connection
        self._repository = transaction_repository
        self._classifier = classifier or TransactionClassifier()
        self._auth_timeout = auth_timeout_seconds
        self._import_timeout = import_timeout_seconds
        self._sources = sources
        self._session: Optional[ImportSession] = None
        self._busy_session: Optional[ImportSession] = None

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        bank_connection: Optional[BankConnectionPort] = None,
        settings: Optional[Settings] = None,
    ) -> BankImportOrchestrator:
        settings = settings or get_settings()
        return cls(
            bank_connection=bank_connection
            or SimulatedBankAdapter.from_settings(settings),
            transaction_repository=factory.transaction_repository(),
            auth_timeout_seconds=settings.bank_auth_timeout_seconds,
            import_timeout_seconds=settings.bank_import_timeout_seconds,
        )

    @property
    def session(self) -> Optional[ImportSession]:
        """The most recent session, if any."""
        return self._session

    async def connect(
        self,
        source_id: str,
        credentials: Optional[BankCredentials],
    ) -> ConnectionResult:
        """Validate input, start a fresh session and authenticate.

        Raises
        ------
        UnknownBankSourceError
            If no source is selected or the id is not supported
        InvalidCredentialsFormatError
            If credentials are missing
        BankAuthenticationError
            If the bank refused the login, timed out or was unreachable
        ImportSessionAbandonedError
            If the session was abandoned while authenticating
        """
        session = self._start_session(source_id, credentials)
        session.begin_authentication()
        logger.info(
            "Authenticating against '%s' (session %s)",
            session.source_id,
            session.id,
        )

        self._busy_session = session
        try:
            result = await self._authenticate(session.source_id, credentials)
        finally:
            self._release(session)

        self._ensure_not_abandoned(session)

        if not result.success:
            reason = result.failure_reason or AuthFailureReason.TEMPORARILY_UNAVAILABLE
            session.mark_failed(reason.message)
            logger.warning(
                "Authentication against '%s' failed: %s",
                session.source_id,
                reason.value,
            )
            raise BankAuthenticationError(reason, source_id=session.source_id)

        session.mark_authenticated(result.connection_id, result.accounts_found)
        logger.info(
            "Connected to '%s' (%d account(s) found)",
            session.source_id,
            result.accounts_found,
        )
        return ConnectionResult(
            success=True,
            connected_at=session.updated_at,
            source_id=session.source_id,
            session_id=str(session.id),
            connection_id=result.connection_id,
            accounts_found=result.accounts_found,
        )

    async def import_transactions(self, source_id: str) -> ImportSummary:
        """Fetch, classify and persist records for the connected source.

        Records are created one at a time in the order the bank returned
        them. The first failing create aborts the batch; records created
        before it are kept.

        Raises
        ------
        TransactionImportError
            If the fetch fails or times out, or a create fails
        ImportSessionAbandonedError
            If the session was abandoned while importing
        """
        session = self._require_connected_session(source_id)
        self._busy_session = session
        try:
            return await self._import(session)
        finally:
            self._release(session)

    async def run(
        self,
        source_id: str,
        credentials: Optional[BankCredentials],
    ) -> ImportSummary:
        """Connect and import in one go."""
        connection = await self.connect(source_id, credentials)
        return await self.import_transactions(connection.source_id)

    def abandon(self) -> None:
        """Detach from the current session; late results are discarded."""
        if self._session is None or self._session.is_abandoned:
            return
        self._session.abandon()
        logger.info("Import session %s abandoned", self._session.id)

    def resolve_source(self, source_id: str) -> BankSource:
        """Return the supported source for ``source_id`` or raise."""
        source = find_bank_source(source_id, self._sources)
        if source is None:
            raise UnknownBankSourceError(source_id)
        return source

    def _start_session(
        self,
        source_id: str,
        credentials: Optional[BankCredentials],
    ) -> ImportSession:
        busy = self._busy_session
        if busy is not None and not busy.is_abandoned:
            raise ImportInProgressError(busy.source_id)

        source = self.resolve_source(source_id)
        if credentials is None:
            raise InvalidCredentialsFormatError("credentials are required")

        self._session = ImportSession(source_id=source.id, credentials=credentials)
        return self._session

    async def _authenticate(
        self,
        source_id: str,
        credentials: BankCredentials,
    ) -> AuthenticationResult:
        try:
            return await asyncio.wait_for(
                self._bank.authenticate(source_id, credentials),
                timeout=self._auth_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Authentication against '%s' timed out after %.1fs",
                source_id,
                self._auth_timeout,
            )
        except BankAuthenticationError as e:
            return AuthenticationResult.failed(e.reason)
        except BankConnectionError as e:
            logger.warning("Bank '%s' unreachable: %s", source_id, e.message)
        return AuthenticationResult.failed(AuthFailureReason.TEMPORARILY_UNAVAILABLE)

    async def _import(self, session: ImportSession) -> ImportSummary:
        records = await self._fetch(session)
        logger.info(
            "Fetched %d record(s) from '%s'",
            len(records),
            session.source_id,
        )

        created: list[StoredTransaction] = []
        for record in records:
            self._ensure_not_abandoned(session)
            transaction = self._classifier.classify_record(
                record,
                source_id=session.source_id,
            )
            try:
                stored = await self._repository.create(transaction)
            except Exception as e:
                logger.error(
                    "Storing record %d of %d from '%s' failed: %s",
                    session.created_count + 1,
                    len(records),
                    session.source_id,
                    e,
                )
                raise self._fail(session, f"Failed to store transaction: {e}") from e
            session.record_created()
            created.append(stored)

        session.mark_succeeded()
        logger.info(
            "Imported %d transaction(s) from '%s'",
            session.result_count,
            session.source_id,
        )
        return ImportSummary(
            source_id=session.source_id,
            imported_at=utc_now(),
            transactions=created,
        )

    async def _fetch(self, session: ImportSession) -> list[RawImportRecord]:
        try:
            records = await asyncio.wait_for(
                self._bank.fetch_raw_records(session.source_id),
                timeout=self._import_timeout,
            )
        except asyncio.TimeoutError as e:
            reason = f"Fetching transactions timed out after {self._import_timeout}s"
            raise self._fail(session, reason) from e
        except Exception as e:
            raise self._fail(session, f"Failed to fetch transactions: {e}") from e
        self._ensure_not_abandoned(session)
        return list(records)

    def _fail(self, session: ImportSession, reason: str) -> TransactionImportError:
        # Raises ImportSessionAbandonedError instead if the caller already left
        session.mark_failed(reason)
        logger.warning("Import from '%s' failed: %s", session.source_id, reason)
        return TransactionImportError(
            reason,
            imported_count=session.created_count,
            source_id=session.source_id,
        )

    def _require_connected_session(self, source_id: str) -> ImportSession:
        session = self._session
        source = find_bank_source(source_id, self._sources)
        if session is None or source is None or session.source_id != source.id:
            msg = f"No authenticated connection to '{source_id}'; call connect first"
            raise BusinessRuleViolation(msg)
        self._ensure_not_abandoned(session)
        if self._busy_session is session:
            raise ImportInProgressError(session.source_id)
        if session.stage != ImportStage.IMPORTING:
            raise InvalidImportStageTransitionError(
                session.stage,
                ImportStage.IMPORTING,
            )
        return session

    def _release(self, session: ImportSession) -> None:
        if self._busy_session is session:
            self._busy_session = None

    @staticmethod
    def _ensure_not_abandoned(session: ImportSession) -> None:
        if session.is_abandoned:
            logger.info("Discarding late result for abandoned session %s", session.id)
            raise ImportSessionAbandonedError(str(session.id))
