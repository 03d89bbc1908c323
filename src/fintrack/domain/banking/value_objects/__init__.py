"""Value objects for banking domain."""

from fintrack.domain.banking.value_objects.authentication_result import (
    AuthenticationResult,
    AuthFailureReason,
)
from fintrack.domain.banking.value_objects.bank_credentials import BankCredentials
from fintrack.domain.banking.value_objects.bank_source import (
    SUPPORTED_BANK_SOURCES,
    BankSource,
    find_bank_source,
)
from fintrack.domain.banking.value_objects.raw_import_record import RawImportRecord

__all__ = [
    "SUPPORTED_BANK_SOURCES",
    "AuthFailureReason",
    "AuthenticationResult",
    "BankCredentials",
    "BankSource",
    "RawImportRecord",
    "find_bank_source",
]
