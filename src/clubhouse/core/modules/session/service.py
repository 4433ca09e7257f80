import secrets
from datetime import timedelta
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from clubhouse.core.core import Service
from clubhouse.core.db import store_call
from clubhouse.core.modules.session.models import AuthToken, Session
from clubhouse.core.modules.user.models import User
from clubhouse.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Service for managing user sessions."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("sessions")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        # Unique index for auth_token (for authentication lookups)
        await self._collection.create_index([("auth_token", 1)], unique=True)
        # Single index for user_id (for finding sessions by user)
        await self._collection.create_index([("user_id", 1)])
        # TTL index, MongoDB drops each session once expires_at has passed
        await self._collection.create_index([("expires_at", 1)], expireAfterSeconds=0)

    async def create_session(self, user: User) -> Session:
        """Create an authenticated session for a user who just proved their password."""
        created_at = now()
        session = Session(
            auth_token=secrets.token_urlsafe(32),
            user_id=user.id,
            username=user.username,
            created_at=created_at,
            expires_at=created_at + timedelta(hours=self.core.config.session_ttl_hours),
        )
        with store_call("create_session"):
            await self._collection.insert_one(session.to_mongo())
        logger.debug("session_created", user_id=str(user.id))
        return session

    async def get_session(self, auth_token: AuthToken) -> Session | None:
        """Return the live session for a token, None if unknown or expired."""
        with store_call("get_session"):
            doc = await self._collection.find_one({"auth_token": auth_token})
        if doc is None:
            return None
        session = Session.model_validate(doc)
        # The TTL monitor runs about once a minute, so expiry is checked here too
        if session.is_expired():
            return None
        return session

    async def invalidate_session(self, auth_token: AuthToken) -> None:
        """Delete a session. Failures are logged and never reach the caller."""
        try:
            result = await self._collection.delete_one({"auth_token": auth_token})
        except PyMongoError:
            logger.exception("session_invalidate_failed")
            return
        logger.debug("session_invalidated", deleted_count=result.deleted_count)
