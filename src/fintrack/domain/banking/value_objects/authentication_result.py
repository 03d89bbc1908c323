"""Outcome of an authentication attempt against a bank source."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AuthFailureReason(Enum):
    """Fixed set of reasons a bank may refuse a login."""

    INVALID_CREDENTIALS = "invalid_credentials"
    TEMPORARILY_UNAVAILABLE = "temporarily_unavailable"
    ACCOUNT_LOCKED = "account_locked"
    MFA_REQUIRED = "mfa_required"

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]

    def is_retryable(self) -> bool:
        """Whether re-entering credentials or waiting can fix this."""
        return self in (
            AuthFailureReason.INVALID_CREDENTIALS,
            AuthFailureReason.TEMPORARILY_UNAVAILABLE,
        )


_REASON_MESSAGES: dict[AuthFailureReason, str] = {
    AuthFailureReason.INVALID_CREDENTIALS: (
        "Invalid credentials. Please check your username and password."
    ),
    AuthFailureReason.TEMPORARILY_UNAVAILABLE: (
        "Bank connection temporarily unavailable. Please try again later."
    ),
    AuthFailureReason.ACCOUNT_LOCKED: "Account locked. Please contact your bank.",
    AuthFailureReason.MFA_REQUIRED: (
        "Two-factor authentication required. "
        "Please enable it in your bank settings."
    ),
}


@dataclass(frozen=True)
class AuthenticationResult:
    """What the bank connection port reports back from ``authenticate``."""

    success: bool
    failure_reason: Optional[AuthFailureReason] = None
    connection_id: Optional[str] = None
    accounts_found: int = 0

    def __post_init__(self):
        if not self.success and self.failure_reason is None:
            msg = "Failed authentication must carry a failure reason"
            raise ValueError(msg)

    @property
    def error(self) -> Optional[str]:
        return self.failure_reason.message if self.failure_reason else None

    @classmethod
    def succeeded(
        cls,
        connection_id: str,
        accounts_found: int = 1,
    ) -> "AuthenticationResult":
        return cls(
            success=True,
            connection_id=connection_id,
            accounts_found=accounts_found,
        )

    @classmethod
    def failed(cls, reason: AuthFailureReason) -> "AuthenticationResult":
        return cls(success=False, failure_reason=reason)
