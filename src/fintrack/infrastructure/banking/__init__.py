"""Banking infrastructure adapters."""

from fintrack.infrastructure.banking.simulated_bank_adapter import (
    SAMPLE_RECORDS,
    SimulatedBankAdapter,
)

__all__ = ["SAMPLE_RECORDS", "SimulatedBankAdapter"]
