"""DTOs for the import workflow."""

from fintrack.application.dtos.integration.connection_result import (
    ConnectionResult,
)
from fintrack.application.dtos.integration.import_summary import ImportSummary

__all__ = ["ConnectionResult", "ImportSummary"]
