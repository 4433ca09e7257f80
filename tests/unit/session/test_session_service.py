"""Tests for SessionService."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import AutoReconnect

from clubhouse.core.modules.session.models import AuthToken
from clubhouse.utils import now


@pytest.fixture
def session_service(core):
    return core.services.session


@pytest.fixture
def sessions_collection(core):
    return core.database.get_collection("sessions")


@pytest.fixture
async def alice(core):
    return await core.services.user.create_user("alice", "secret1")


class TestCreateSession:
    async def test_caches_identity_with_24h_expiry(self, session_service, alice):
        session = await session_service.create_session(alice)

        assert session.user_id == alice.id
        assert session.username == "alice"
        assert session.expires_at - session.created_at == timedelta(hours=24)
        assert len(session.auth_token) >= 32

    async def test_admin_flag_not_stored(self, session_service, sessions_collection, alice):
        session = await session_service.create_session(alice)

        doc = await sessions_collection.find_one({"auth_token": session.auth_token})
        assert "is_admin" not in doc

    async def test_tokens_are_unique(self, session_service, alice):
        first = await session_service.create_session(alice)
        second = await session_service.create_session(alice)
        assert first.auth_token != second.auth_token


class TestGetSession:
    async def test_round_trip(self, session_service, alice):
        created = await session_service.create_session(alice)

        session = await session_service.get_session(AuthToken(created.auth_token))

        assert session is not None
        assert session.username == "alice"
        assert session.user_id == alice.id

    async def test_unknown_token(self, session_service):
        assert await session_service.get_session(AuthToken("missing")) is None

    async def test_expired_session_is_anonymous(self, session_service, sessions_collection, alice):
        created = await session_service.create_session(alice)
        await sessions_collection.update_one(
            {"auth_token": created.auth_token}, {"$set": {"expires_at": now() - timedelta(seconds=1)}}
        )

        assert await session_service.get_session(AuthToken(created.auth_token)) is None


class TestInvalidateSession:
    async def test_removes_record(self, session_service, sessions_collection, alice):
        created = await session_service.create_session(alice)

        await session_service.invalidate_session(AuthToken(created.auth_token))

        assert await sessions_collection.count_documents({}) == 0
        assert await session_service.get_session(AuthToken(created.auth_token)) is None

    async def test_unknown_token_is_fine(self, session_service):
        await session_service.invalidate_session(AuthToken("missing"))

    async def test_store_failure_is_swallowed(self, session_service):
        collection = MagicMock()
        collection.delete_one = AsyncMock(side_effect=AutoReconnect("connection reset"))
        session_service._collection = collection

        await session_service.invalidate_session(AuthToken("anything"))

        collection.delete_one.assert_awaited_once()


class TestIndexes:
    async def test_on_start_creates_token_user_and_ttl_indexes(self, session_service, sessions_collection):
        await session_service.on_start()

        indexes = await sessions_collection.index_information()
        assert indexes["auth_token_1"]["unique"] is True
        assert "user_id_1" in indexes
        assert indexes["expires_at_1"]["expireAfterSeconds"] == 0
