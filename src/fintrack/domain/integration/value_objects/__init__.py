"""Value objects for the integration domain."""

from fintrack.domain.integration.value_objects.import_stage import ImportStage

__all__ = ["ImportStage"]
