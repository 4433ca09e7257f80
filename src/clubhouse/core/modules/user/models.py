from pydantic import BaseModel, Field

from clubhouse.core.db import MongoModel


class User(MongoModel):
    """User domain model with credentials.

    Indexed on username - unique, plus a text index for the admin directory.
    """

    username: str
    password_hash: str  # bcrypt hash
    is_admin: bool = False


class UserSummary(BaseModel):
    """User directory entry shown to administrators."""

    id: str = Field(..., description="User ID as a hex string")
    username: str = Field(..., description="Username")
    is_admin: bool = Field(..., description="Whether the user holds the admin role")

    @classmethod
    def from_domain(cls, user: User) -> "UserSummary":
        """Create view model from domain model."""
        return cls(id=str(user.id), username=user.username, is_admin=user.is_admin)
