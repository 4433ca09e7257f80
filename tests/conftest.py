"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from mongomock_motor import AsyncMongoMockClient

from clubhouse.config import Config
from clubhouse.core.core import Core

PHOTO_NAMES = ["DSC_0706.jpg", "DSC_0728.jpg", "DSC_0794.jpg"]


@pytest.fixture
def photos_dir(tmp_path: Path) -> Path:
    """Directory with a few fake photos."""
    path = tmp_path / "photos"
    path.mkdir()
    for name in PHOTO_NAMES:
        (path / name).write_bytes(f"jpeg:{name}".encode())
    return path


@pytest.fixture
def config(photos_dir: Path) -> Config:
    """Test configuration with cheap bcrypt rounds."""
    return Config(
        database_url="mongodb://localhost:27017/clubhouse_test",
        session_secret_key="test-secret-key",
        photos_path=str(photos_dir),
        bcrypt_rounds=4,
    )


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """In-memory MongoDB shared by every Core built in a test."""
    return AsyncMongoMockClient()


@pytest.fixture
def core(config: Config, mongo_client: AsyncMongoMockClient) -> Core:
    return Core(config, mongo_client)
