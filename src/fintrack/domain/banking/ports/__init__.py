"""Ports (interfaces) for the banking domain."""

from fintrack.domain.banking.ports.bank_connection_port import BankConnectionPort

__all__ = ["BankConnectionPort"]
