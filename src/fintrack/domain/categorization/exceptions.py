"""Categorization domain exceptions."""

from fintrack.domain.shared.exceptions import ErrorCode, ValidationError


class InvalidCategoryError(ValidationError):
    """Raised when a label is not part of the category vocabulary."""

    def __init__(self, label: str) -> None:
        super().__init__(
            message=f"Unknown category '{label}'",
            code=ErrorCode.INVALID_CATEGORY,
            details={"label": label},
        )
