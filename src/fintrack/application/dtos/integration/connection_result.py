"""DTO for a successful bank connection."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ConnectionResult:
    """Result of authenticating against a bank source."""

    success: bool
    connected_at: datetime
    source_id: str
    session_id: str
    connection_id: Optional[str] = None
    accounts_found: int = 0

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "connected_at": self.connected_at.isoformat(),
            "source_id": self.source_id,
            "session_id": self.session_id,
            "connection_id": self.connection_id,
            "accounts_found": self.accounts_found,
        }
