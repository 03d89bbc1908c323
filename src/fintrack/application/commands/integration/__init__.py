"""Commands for importing from bank sources."""

from fintrack.application.commands.integration.bank_import_command import (
    BankImportCommand,
)

__all__ = ["BankImportCommand"]
