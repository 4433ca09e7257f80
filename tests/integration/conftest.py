"""Shared helpers for HTTP integration tests.

The TestClient is used without its context manager, so the lifespan (index
creation, client shutdown) does not run; the App is wired into app.state by hand.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from clubhouse.app import App
from clubhouse.core.core import Core
from clubhouse.web.server import create_fastapi_app


@pytest.fixture
def app(config, mongo_client):
    return App(config, mongo_client)


@pytest.fixture
def store(config, mongo_client):
    """Second Core on the same in-memory database, for arranging and inspecting state."""
    return Core(config, mongo_client)


@pytest.fixture
def fastapi_app(app, config):
    fastapi_app = create_fastapi_app(app, config)
    fastapi_app.state.app = app
    fastapi_app.state.config = config
    return fastapi_app


@pytest.fixture
def client(fastapi_app):
    return TestClient(fastapi_app, follow_redirects=False)


@pytest.fixture
def make_client(fastapi_app):
    """Factory for extra browsers sharing the same server."""
    return lambda: TestClient(fastapi_app, follow_redirects=False)


@pytest.fixture
def register():
    """Post the registration form, return the redirect target."""

    def _register(client: TestClient, username: str, password: str = "secret1") -> str:
        response = client.post("/api/register", data={"username": username, "password": password})
        assert response.status_code == 302
        return response.headers["location"]

    return _register


@pytest.fixture
def login():
    """Post the login form, return the redirect target."""

    def _login(client: TestClient, username: str, password: str = "secret1") -> str:
        response = client.post("/api/login", data={"username": username, "password": password})
        assert response.status_code == 302
        return response.headers["location"]

    return _login


@pytest.fixture
def user_id_of(store):
    def _user_id_of(username: str) -> str:
        user = asyncio.run(store.services.user.find_user_by_username(username))
        assert user is not None
        return str(user.id)

    return _user_id_of


@pytest.fixture
def set_admin(store):
    """Flip the admin flag directly in the store, bypassing the HTTP surface."""

    def _set_admin(username: str, is_admin: bool) -> None:
        user = asyncio.run(store.services.user.find_user_by_username(username))
        assert user is not None
        asyncio.run(store.services.user.set_admin(user.id, is_admin))

    return _set_admin


@pytest.fixture
def admin_client(client, register, login, set_admin):
    """Browser logged in as the admin 'boss'."""
    register(client, "boss")
    set_admin("boss", True)
    assert login(client, "boss") == "/admin"
    return client
