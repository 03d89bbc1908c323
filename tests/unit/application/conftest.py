"""Shared fixtures for application layer tests."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from fintrack.domain.banking.ports import BankConnectionPort
from fintrack.domain.banking.value_objects import (
    AuthenticationResult,
    BankCredentials,
    RawImportRecord,
)
from fintrack.domain.transactions.value_objects import TransactionType
from fintrack.infrastructure.persistence.in_memory import InMemoryTransactionRepository


@pytest.fixture
def credentials():
    return BankCredentials.from_plain("jane", "hunter2", "DE89370400440532013000")


@pytest.fixture
def raw_records():
    """The four records the simulated bank hands out, oldest last."""
    return [
        RawImportRecord(
            date=date(2024, 3, 4),
            amount=Decimal("45.67"),
            description="Starbucks Coffee #1234",
            merchant="Starbucks",
            declared_type=TransactionType.EXPENSE,
        ),
        RawImportRecord(
            date=date(2024, 3, 3),
            amount=Decimal("89.23"),
            description="Shell Gas Station",
            merchant="Shell",
            declared_type=TransactionType.EXPENSE,
        ),
        RawImportRecord(
            date=date(2024, 3, 2),
            amount=Decimal("156.78"),
            description="Whole Foods Market",
            merchant="Whole Foods",
            declared_type=TransactionType.EXPENSE,
        ),
        RawImportRecord(
            date=date(2024, 3, 1),
            amount=Decimal("2500.00"),
            description="Direct Deposit - Payroll",
            merchant="Employer",
            declared_type=TransactionType.INCOME,
        ),
    ]


@pytest.fixture
def mock_bank(raw_records):
    """Bank port that logs in and returns the sample records immediately."""
    bank = AsyncMock(spec=BankConnectionPort)
    bank.authenticate.return_value = AuthenticationResult.succeeded("conn_1", 2)
    bank.fetch_raw_records.return_value = raw_records
    return bank


@pytest.fixture
def repository():
    return InMemoryTransactionRepository()
