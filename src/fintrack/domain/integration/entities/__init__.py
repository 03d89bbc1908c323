"""Entities for the integration domain."""

from fintrack.domain.integration.entities.import_session import ImportSession

__all__ = ["ImportSession"]
