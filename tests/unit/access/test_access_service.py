"""Tests for the access gate: authenticated check followed by a live admin check."""

import pytest
from bson import ObjectId

from clubhouse.core.modules.access.models import Role
from clubhouse.core.modules.session.models import AuthToken
from clubhouse.errors import AccessDeniedError, AuthenticationError


@pytest.fixture
def access(core):
    return core.services.access


@pytest.fixture
async def member(core):
    user = await core.services.user.create_user("member", "secret1")
    session = await core.services.session.create_session(user)
    return user, AuthToken(session.auth_token)


@pytest.fixture
async def admin(core):
    user = await core.services.user.create_user("boss", "secret1")
    await core.services.user.set_admin(user.id, True)
    session = await core.services.session.create_session(user)
    return user, AuthToken(session.auth_token)


class TestGetSession:
    async def test_no_token_is_anonymous(self, access):
        assert await access.get_session(None) is None
        assert await access.get_session(AuthToken("")) is None

    async def test_valid_token(self, access, member):
        user, token = member
        session = await access.get_session(token)
        assert session is not None
        assert session.user_id == user.id


class TestGetRole:
    async def test_member(self, access, member):
        _, token = member
        session = await access.get_session(token)
        assert await access.get_role(session) == Role.MEMBER

    async def test_admin(self, access, admin):
        _, token = admin
        session = await access.get_session(token)
        assert await access.get_role(session) == Role.ADMIN

    async def test_dangling_user_reference(self, core, access, member):
        user, token = member
        session = await access.get_session(token)
        await core.database.get_collection("users").delete_one({"_id": user.id})

        assert await access.get_role(session) == Role.NOT_FOUND


class TestEnsureAuthenticated:
    async def test_anonymous_rejected(self, access):
        with pytest.raises(AuthenticationError):
            await access.ensure_authenticated(None)

    async def test_unknown_token_rejected(self, access):
        with pytest.raises(AuthenticationError):
            await access.ensure_authenticated(AuthToken("forged"))

    async def test_member_passes(self, access, member):
        _, token = member
        session = await access.ensure_authenticated(token)
        assert session.username == "member"


class TestEnsureAdmin:
    async def test_anonymous_fails_authentication_first(self, access):
        with pytest.raises(AuthenticationError):
            await access.ensure_admin(None)

    async def test_member_denied(self, access, member):
        _, token = member
        with pytest.raises(AccessDeniedError):
            await access.ensure_admin(token)

    async def test_admin_passes(self, access, admin):
        _, token = admin
        session = await access.ensure_admin(token)
        assert session.username == "boss"

    async def test_revocation_applies_to_existing_session(self, core, access, admin):
        user, token = admin
        await access.ensure_admin(token)

        await core.services.user.set_admin(user.id, False)

        with pytest.raises(AccessDeniedError):
            await access.ensure_admin(token)
        # Still a logged-in member
        await access.ensure_authenticated(token)

    async def test_promotion_applies_to_existing_session(self, core, access, member):
        user, token = member
        await core.services.user.set_admin(user.id, True)

        session = await access.ensure_admin(token)
        assert session.user_id == user.id

    async def test_deleted_account_denied(self, core, access, admin):
        user, token = admin
        await core.database.get_collection("users").delete_one({"_id": user.id})

        with pytest.raises(AccessDeniedError):
            await access.ensure_admin(token)

    async def test_session_for_unknown_user_id(self, core, access):
        ghost = await core.services.user.create_user("ghost", "secret1")
        ghost.id = ObjectId()
        session = await core.services.session.create_session(ghost)

        with pytest.raises(AccessDeniedError):
            await access.ensure_admin(AuthToken(session.auth_token))
