"""Commands for manually managed transactions."""

from fintrack.application.commands.transactions.create_transaction_command import (
    CreateTransactionCommand,
)
from fintrack.application.commands.transactions.delete_transaction_command import (
    DeleteTransactionCommand,
)

__all__ = ["CreateTransactionCommand", "DeleteTransactionCommand"]
