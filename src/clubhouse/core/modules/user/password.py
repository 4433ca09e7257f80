"""bcrypt hashing, run off the event loop.

bcrypt is CPU-bound (tens of milliseconds at the default cost), so both calls
go through ``anyio.to_thread.run_sync`` to keep concurrent requests moving.
"""

import bcrypt
from anyio import to_thread


async def hash_password(password: str, rounds: int) -> str:
    encoded = password.encode("utf-8")
    return await to_thread.run_sync(lambda: bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8"))


async def check_password(password: str, password_hash: str) -> bool:
    """Return False for malformed hashes rather than propagating a ValueError."""
    encoded_password = password.encode("utf-8")
    encoded_hash = password_hash.encode("utf-8")
    try:
        return await to_thread.run_sync(lambda: bcrypt.checkpw(encoded_password, encoded_hash))
    except ValueError:
        return False
