"""Simulated bank source.

Stands in for a real aggregator: it waits a configurable time, refuses a
configurable share of logins with one of the known failure reasons, and
returns a fixed batch of recent card and payroll records.
"""

from __future__ import annotations

import asyncio
import logging
import random
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from fintrack.domain.banking.ports import BankConnectionPort
from fintrack.domain.banking.value_objects import (
    AuthenticationResult,
    AuthFailureReason,
    RawImportRecord,
)
from fintrack.domain.shared.time import days_ago, utc_now
from fintrack.domain.transactions.value_objects import TransactionType

if TYPE_CHECKING:
    from fintrack.domain.banking.value_objects import BankCredentials
    from fintrack_config import Settings

logger = logging.getLogger(__name__)

# (days ago, amount, description, merchant, type)
SAMPLE_RECORDS: tuple[tuple[int, str, str, str, TransactionType], ...] = (
    (0, "45.67", "Starbucks Coffee #1234", "Starbucks", TransactionType.EXPENSE),
    (1, "89.23", "Shell Gas Station", "Shell", TransactionType.EXPENSE),
    (2, "156.78", "Whole Foods Market", "Whole Foods", TransactionType.EXPENSE),
    (3, "2500.00", "Direct Deposit - Payroll", "Employer", TransactionType.INCOME),
)

MAX_ACCOUNTS_FOUND = 3


class SimulatedBankAdapter(BankConnectionPort):
    """In-process bank source with injectable latency and failure rate."""

    def __init__(
        self,
        auth_latency_seconds: float = 2.0,
        fetch_latency_seconds: float = 3.0,
        failure_probability: float = 0.0,
        rng: Optional[random.Random] = None,
        account_type: str = "checking",
    ):
        if not 0.0 <= failure_probability <= 1.0:
            msg = "failure_probability must be between 0 and 1"
            raise ValueError(msg)
        self._auth_latency = auth_latency_seconds
        self._fetch_latency = fetch_latency_seconds
        self._failure_probability = failure_probability
        self._rng = rng or random.Random()
        self._account_type = account_type

    @classmethod
    def from_settings(cls, settings: Settings) -> SimulatedBankAdapter:
        return cls(
            auth_latency_seconds=settings.bank_auth_latency_seconds,
            fetch_latency_seconds=settings.bank_fetch_latency_seconds,
            failure_probability=settings.bank_failure_probability,
            rng=random.Random(settings.bank_random_seed),
        )

    @property
    def failure_probability(self) -> float:
        return self._failure_probability

    async def authenticate(
        self,
        source_id: str,
        credentials: BankCredentials,
    ) -> AuthenticationResult:
        logger.info(
            "Simulating login to '%s' for %s",
            source_id,
            credentials.masked_account_number or "default account",
        )
        await asyncio.sleep(self._auth_latency)

        if self._rng.random() < self._failure_probability:
            reason = self._rng.choice(list(AuthFailureReason))
            logger.info("Simulated login to '%s' refused: %s", source_id, reason.value)
            return AuthenticationResult.failed(reason)

        connection_id = f"conn_{int(utc_now().timestamp() * 1000)}"
        accounts_found = self._rng.randint(1, MAX_ACCOUNTS_FOUND)
        return AuthenticationResult.succeeded(connection_id, accounts_found)

    async def fetch_raw_records(self, source_id: str) -> list[RawImportRecord]:
        await asyncio.sleep(self._fetch_latency)
        records = [
            RawImportRecord(
                date=days_ago(offset),
                amount=Decimal(amount),
                description=description,
                merchant=merchant,
                account_type=self._account_type,
                declared_type=tx_type,
            )
            for offset, amount, description, merchant, tx_type in SAMPLE_RECORDS
        ]
        logger.info("Simulated %d record(s) from '%s'", len(records), source_id)
        return records
