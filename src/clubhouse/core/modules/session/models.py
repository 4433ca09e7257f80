"""Session management models."""

from datetime import UTC, datetime
from typing import NewType

from bson import ObjectId
from pydantic import Field, field_validator

from clubhouse.core.db import MongoModel
from clubhouse.utils import now

AuthToken = NewType("AuthToken", str)


class Session(MongoModel):
    """Authenticated browser session.

    Indexed on auth_token - unique, user_id, expires_at (TTL).
    The admin flag is never stored here, it is re-read from the user on every admin request.
    """

    auth_token: str
    user_id: ObjectId
    username: str
    created_at: datetime = Field(default_factory=now)
    expires_at: datetime

    @field_validator("created_at", "expires_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        # MongoDB hands back naive UTC datetimes unless the client is tz_aware
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)

    def is_expired(self) -> bool:
        return self.expires_at <= now()
