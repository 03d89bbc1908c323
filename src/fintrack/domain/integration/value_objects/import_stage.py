"""Import workflow stage enumeration."""

from enum import Enum


class ImportStage(Enum):
    """Stage of one bank-connect-and-import attempt."""

    SELECTING = "selecting"
    AUTHENTICATING = "authenticating"
    IMPORTING = "importing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def is_final(self) -> bool:
        return self in (ImportStage.SUCCEEDED, ImportStage.FAILED)

    def is_in_flight(self) -> bool:
        return self in (ImportStage.AUTHENTICATING, ImportStage.IMPORTING)

    def can_transition_to(self, target: "ImportStage") -> bool:
        return target in _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[ImportStage, frozenset[ImportStage]] = {
    ImportStage.SELECTING: frozenset({ImportStage.AUTHENTICATING}),
    ImportStage.AUTHENTICATING: frozenset(
        {ImportStage.IMPORTING, ImportStage.FAILED},
    ),
    ImportStage.IMPORTING: frozenset({ImportStage.SUCCEEDED, ImportStage.FAILED}),
    ImportStage.SUCCEEDED: frozenset(),
    ImportStage.FAILED: frozenset(),
}
