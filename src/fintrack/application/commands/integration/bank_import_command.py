"""Connect to a bank source with plain credentials and import its records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fintrack.application.services import BankImportOrchestrator
from fintrack.domain.banking.value_objects import BankCredentials

if TYPE_CHECKING:
    from fintrack.application.dtos.integration import ImportSummary
    from fintrack.application.factories import RepositoryFactory
    from fintrack.domain.banking.ports import BankConnectionPort
    from fintrack_config import Settings


class BankImportCommand:
    """Wrap raw user input into credentials and run the full import flow."""

    def __init__(self, orchestrator: BankImportOrchestrator):
        self._orchestrator = orchestrator

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        bank_connection: Optional[BankConnectionPort] = None,
        settings: Optional[Settings] = None,
    ) -> BankImportCommand:
        return cls(
            orchestrator=BankImportOrchestrator.from_factory(
                factory,
                bank_connection=bank_connection,
                settings=settings,
            ),
        )

    @property
    def orchestrator(self) -> BankImportOrchestrator:
        return self._orchestrator

    async def execute(
        self,
        source_id: str,
        username: Optional[str],
        password: Optional[str],
        account_number: Optional[str] = None,
    ) -> ImportSummary:
        self._orchestrator.resolve_source(source_id)
        credentials = BankCredentials.from_plain(
            username=username,
            password=password,
            account_number=account_number,
        )
        return await self._orchestrator.run(source_id, credentials)
