from enum import StrEnum

from pydantic import BaseModel

from clubhouse.core.modules.session.models import AuthToken


class Role(StrEnum):
    """Role derived from the user record at request time, never stored on the session."""

    ADMIN = "admin"
    MEMBER = "member"
    NOT_FOUND = "not_found"  # Session points at a user that no longer exists


class LoginResult(BaseModel):
    """Outcome of a successful login: the new session token plus a role hint for the redirect."""

    auth_token: AuthToken
    role: Role
