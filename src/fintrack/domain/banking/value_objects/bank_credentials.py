"""Bank credentials value object."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from fintrack.domain.banking.exceptions import InvalidCredentialsFormatError
from fintrack.domain.shared.value_objects.secure_string import SecureString


class BankCredentials(BaseModel):
    """
    Login data the user types into the connect dialog.

    Username and password are SecureStrings so an ImportSession can be
    logged or printed without exposing them.
    """

    username: SecureString = Field(..., description="Online banking login")
    password: SecureString = Field(..., description="Online banking password")
    account_number: Optional[str] = Field(default=None, max_length=34)

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return (
            f"BankCredentials(username=*****, password=*****, "
            f"account_number={self.masked_account_number})"
        )

    def __str__(self) -> str:
        return f"BankCredentials(account_number={self.masked_account_number})"

    @property
    def masked_account_number(self) -> Optional[str]:
        if not self.account_number:
            return None
        return f"****{self.account_number[-4:]}"

    @classmethod
    def from_plain(
        cls,
        username: Optional[str],
        password: Optional[str],
        account_number: Optional[str] = None,
    ) -> "BankCredentials":
        """Build credentials from form input.

        Raises
        ------
        InvalidCredentialsFormatError
            If username or password is missing or blank
        """
        if not username or not username.strip():
            raise InvalidCredentialsFormatError("username is required")
        if not password or not password.strip():
            raise InvalidCredentialsFormatError("password is required")
        try:
            return cls(
                username=SecureString(username.strip()),
                password=SecureString(password),
                account_number=(account_number or "").strip() or None,
            )
        except PydanticValidationError as e:
            raise InvalidCredentialsFormatError(str(e.errors()[0]["msg"])) from e
