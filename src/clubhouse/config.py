from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # e.g. mongodb://localhost:27017/clubhouse, database name is the path
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    debug: bool = False
    session_secret_key: str  # Signs the session cookie
    cors_origins: list[str] = []
    photos_path: str = "photos"  # Directory served by /api/members/randomPhoto
    bcrypt_rounds: int = 10
    session_ttl_hours: int = 24
    bootstrap_admin: str | None = None  # Existing username promoted to admin on startup (optional)

    model_config = {
        "env_file": [".env"],
        "env_prefix": "CLUBHOUSE_",
        "extra": "ignore",
    }
