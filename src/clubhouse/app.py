from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient

from clubhouse.config import Config
from clubhouse.core.core import Core
from clubhouse.core.modules.access.models import LoginResult, Role
from clubhouse.core.modules.session.models import AuthToken, Session
from clubhouse.core.modules.user.models import UserSummary
from clubhouse.utils import parse_user_id


class App:
    """Facade for all application operations, validates permissions before delegating to Core."""

    def __init__(self, config: Config, mongo_client: AsyncMongoClient[dict[str, Any]] | None = None) -> None:
        self._core = Core(config, mongo_client)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def get_session(self, auth_token: AuthToken | None) -> Session | None:
        """Current session, or None for an anonymous request."""
        return await self._core.services.access.get_session(auth_token)

    async def is_authenticated(self, auth_token: AuthToken | None) -> bool:
        return await self.get_session(auth_token) is not None

    async def register(self, username: str, password: str) -> ObjectId:
        """Create a member account and return its id."""
        user = await self._core.services.user.create_user(username, password)
        return user.id

    async def login(self, username: str, password: str, previous_token: AuthToken | None = None) -> LoginResult:
        """Authenticate user and create session.

        A session the browser already held is invalidated once the new one exists.
        """
        user = await self._core.services.user.authenticate(username, password)
        session = await self._core.services.session.create_session(user)
        if previous_token:
            await self._core.services.session.invalidate_session(previous_token)
        return LoginResult(auth_token=AuthToken(session.auth_token), role=Role.ADMIN if user.is_admin else Role.MEMBER)

    async def logout(self, auth_token: AuthToken | None) -> None:
        """Invalidate the user session, if there is one."""
        if not auth_token:
            return
        await self._core.services.session.invalidate_session(auth_token)

    async def get_username(self, auth_token: AuthToken | None) -> str:
        """Username cached on the session (members only)."""
        session = await self._core.services.access.ensure_authenticated(auth_token)
        return session.username

    async def get_random_photo(self, auth_token: AuthToken | None) -> Path:
        """Pick a photo from the members pool (members only)."""
        await self._core.services.access.ensure_authenticated(auth_token)
        return self._core.services.photo.get_random_photo()

    async def ensure_member(self, auth_token: AuthToken | None) -> Session:
        return await self._core.services.access.ensure_authenticated(auth_token)

    async def ensure_admin(self, auth_token: AuthToken | None) -> Session:
        return await self._core.services.access.ensure_admin(auth_token)

    async def search_users(self, auth_token: AuthToken | None, query: str | None, limit: int | None) -> list[UserSummary] | None:
        """Search the user directory (admin only). None means no search was requested."""
        await self._core.services.access.ensure_admin(auth_token)
        users = await self._core.services.user.search_users(query, limit)
        if users is None:
            return None
        return [UserSummary.from_domain(user) for user in users]

    async def grant_admin(self, auth_token: AuthToken | None, user_id: str | ObjectId) -> None:
        """Give a user the admin role (admin only). Unknown ids are ignored."""
        await self._core.services.access.ensure_admin(auth_token)
        target_id = parse_user_id(user_id)
        if target_id is None:
            return
        await self._core.services.user.set_admin(target_id, True)

    async def revoke_admin(self, auth_token: AuthToken | None, user_id: str | ObjectId) -> bool:
        """Take the admin role away from a user (admin only). Unknown ids are ignored.

        Revoking your own role also ends your session. Returns True in that case
        so the caller can drop the cookie and send the browser to the login page.
        """
        session = await self._core.services.access.ensure_admin(auth_token)
        target_id = parse_user_id(user_id)
        if target_id is None:
            return False
        await self._core.services.user.set_admin(target_id, False)
        if target_id != session.user_id:
            return False
        await self._core.services.session.invalidate_session(AuthToken(session.auth_token))
        return True
