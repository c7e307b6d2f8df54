"""Session token for the NPM API.

A token is obtained by POSTing credentials to /api/tokens and is valid until
the "expires" timestamp the server returns. The client keeps at most one
SessionToken; it is never revoked, only replaced once it has expired.
"""

from __future__ import annotations

__all__ = [
    "SessionToken",
    "TokenState",
]

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenState(str, Enum):
    """Lifecycle state of the client's cached token."""

    ABSENT = "absent"
    VALID = "valid"
    EXPIRED = "expired"


class SessionToken(BaseModel):
    """Bearer token returned by POST /api/tokens.

    Attributes:
        token: Bearer credential sent in the Authorization header.
        expires_at: UTC timestamp after which the token must be re-acquired.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: str = Field(repr=False)
    expires_at: datetime = Field(alias="expires")

    @field_validator("expires_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(timezone.utc) >= self.expires_at

    @property
    def seconds_until_expiry(self) -> float:
        """Seconds until the token expires (negative if expired)."""
        return (self.expires_at - datetime.now(timezone.utc)).total_seconds()
