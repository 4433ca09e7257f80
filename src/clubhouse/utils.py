import re
from datetime import UTC, datetime

from bson import ObjectId

USERNAME_RE = re.compile(r"^[A-Za-z0-9]{1,24}$")

# Largest cursor limit BSON can encode
MAX_LIMIT = 2**63 - 1


def is_username(value: str) -> bool:
    return bool(USERNAME_RE.fullmatch(value))


def now() -> datetime:
    return datetime.now(UTC)


def parse_user_id(value: str | ObjectId) -> ObjectId | None:
    """Normalize a user id from the URL or the store. Returns None if malformed."""
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value) if ObjectId.is_valid(value) else None


def parse_limit(value: str | None) -> int | None:
    """Parse a result limit. Anything but a positive int64 means no limit."""
    if value is None:
        return None
    try:
        limit = int(value)
    except ValueError:
        return None
    return limit if 0 < limit <= MAX_LIMIT else None
