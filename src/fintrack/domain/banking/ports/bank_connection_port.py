"""Bank connection port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fintrack.domain.banking.value_objects import (
        AuthenticationResult,
        BankCredentials,
        RawImportRecord,
    )


class BankConnectionPort(ABC):
    """
    Interface for bank sources.

    This defines what the import workflow needs from a bank: a login
    check and a batch of raw, unclassified records.
    """

    @abstractmethod
    async def authenticate(
        self,
        source_id: str,
        credentials: BankCredentials,
    ) -> AuthenticationResult:
        """
        Log in to the bank source.

        Parameters
        ----------
        source_id
            Identifier of the bank source (e.g. "chase")
        credentials
            Login data entered by the user

        Returns
        -------
        AuthenticationResult; a refused login is reported as
        ``success=False`` with a failure reason, not raised

        Raises
        ------
        BankConnectionError
            If the bank cannot be reached at all
        """

    @abstractmethod
    async def fetch_raw_records(self, source_id: str) -> list[RawImportRecord]:
        """
        Fetch unclassified transactions from an authenticated source.

        Raises
        ------
        BankTransactionFetchError
            If the fetch fails
        """
