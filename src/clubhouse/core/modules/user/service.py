import re
from typing import Any

import structlog
from bson import ObjectId
from pymongo import ASCENDING, TEXT
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from clubhouse.core.core import Service
from clubhouse.core.db import store_call
from clubhouse.core.modules.user.models import User
from clubhouse.core.modules.user.password import check_password, hash_password
from clubhouse.core.modules.user.validators import validate_password, validate_username
from clubhouse.errors import DuplicateUsernameError, InvalidCredentialsError, NotFoundError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Manages user accounts. Every read goes to MongoDB, nothing is cached."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")

    async def on_start(self) -> None:
        """Create indexes and promote the bootstrap admin."""
        await self.ensure_username_index()
        await self._collection.create_index([("username", TEXT)], name="username_text")
        await self.ensure_bootstrap_admin()
        logger.debug("user_service_started")

    async def ensure_username_index(self) -> None:
        # Closes the check-then-insert race in create_user
        await self._collection.create_index([("username", ASCENDING)], unique=True)

    async def find_user(self, user_id: ObjectId) -> User | None:
        """Get user by ID straight from the store, None if it does not exist."""
        with store_call("find_user"):
            doc = await self._collection.find_one({"_id": user_id})
        return User.model_validate(doc) if doc is not None else None

    async def get_user(self, user_id: ObjectId) -> User:
        user = await self.find_user(user_id)
        if user is None:
            raise NotFoundError(f"User '{user_id}' not found")
        return user

    async def find_user_by_username(self, username: str) -> User | None:
        """Get user by exact (case-sensitive) username."""
        with store_call("find_user_by_username"):
            doc = await self._collection.find_one({"username": username})
        return User.model_validate(doc) if doc is not None else None

    async def has_username(self, username: str) -> bool:
        return await self.find_user_by_username(username) is not None

    async def create_user(self, username: str, password: str) -> User:
        """Validate input and create a non-admin user with a hashed password."""
        validate_username(username)
        validate_password(password)
        if await self.has_username(username):
            raise DuplicateUsernameError(f"User '{username}' already exists")

        password_hash = await hash_password(password, self.core.config.bcrypt_rounds)
        user = User(username=username, password_hash=password_hash)
        with store_call("create_user"):
            try:
                await self._collection.insert_one(user.to_mongo())
            except DuplicateKeyError as e:
                # Lost a race against a concurrent registration of the same name
                raise DuplicateUsernameError(f"User '{username}' already exists") from e
        logger.info("user_created", user_id=str(user.id), username=username)
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """Verify credentials and return the freshly loaded user.

        Only the username format is checked up front; the password goes
        straight to bcrypt.
        """
        validate_username(username)
        user = await self.find_user_by_username(username)
        if user is None:
            logger.info("login_failed", username=username, reason="user_not_found")
            raise InvalidCredentialsError
        if not await check_password(password, user.password_hash):
            logger.info("login_failed", username=username, reason="password_mismatch")
            raise InvalidCredentialsError
        return user

    async def search_users(self, query: str | None, limit: int | None = None) -> list[User] | None:
        """Search the directory by case-insensitive username substring.

        Returns None when no search was requested, all users for an empty query.
        """
        if query is None:
            return None
        filter_: dict[str, Any] = {}
        if query:
            filter_ = {"username": {"$regex": re.escape(query), "$options": "i"}}
        with store_call("search_users"):
            return await User.list_cursor(self._collection.find(filter_, limit=limit or 0))

    async def set_admin(self, user_id: ObjectId, is_admin: bool) -> int:
        """Set the admin flag. Missing users are a no-op; store failures are logged and ignored.

        Returns the number of modified documents.
        """
        try:
            result = await self._collection.update_one({"_id": user_id}, {"$set": {"is_admin": is_admin}})
        except PyMongoError:
            logger.exception("admin_flag_update_failed", user_id=str(user_id), is_admin=is_admin)
            return 0
        logger.info(
            "admin_flag_updated",
            user_id=str(user_id),
            is_admin=is_admin,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )
        return result.modified_count

    async def ensure_bootstrap_admin(self) -> None:
        """Grant admin to the configured bootstrap username if that account exists."""
        username = self.core.config.bootstrap_admin
        if not username:
            return
        user = await self.find_user_by_username(username)
        if user is None:
            logger.warning("bootstrap_admin_missing", username=username)
            return
        if not user.is_admin:
            await self.set_admin(user.id, True)
