"""Application layer services."""

from fintrack.application.services.bank_import_orchestrator import (
    BankImportOrchestrator,
)

__all__ = ["BankImportOrchestrator"]
