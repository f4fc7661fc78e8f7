"""
pytest configuration and fixtures.
"""

import os

# settings are read once at import time; keep the module-level app off MySQL
os.environ.setdefault("DATABASE_URL", "sqlite://")

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from roomchat.core.db import build_engine, get_db
from roomchat.main import create_app
from roomchat.models.chat_room import ChatRoom


class BrokenSession:
    """Session stand-in whose every statement fails like a dropped connection."""

    def __init__(self):
        self.rolled_back = False
        self.closed = False

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))

    query = _fail
    flush = _fail
    commit = _fail
    execute = _fail

    def add(self, obj):
        pass

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """App bound to a fresh in-memory SQLite database."""
    app = create_app(build_engine("sqlite://"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_client(client: TestClient) -> Generator[TestClient, None, None]:
    """Same app, but every request gets a session that cannot reach the database."""
    client.app.dependency_overrides[get_db] = lambda: BrokenSession()
    yield client
    client.app.dependency_overrides.clear()


@pytest.fixture
def fetch_room(client: TestClient) -> Callable[[int], ChatRoom]:
    """Load a room in its own short-lived session so no stale identity map is reused."""

    def _fetch(room_id: int):
        with client.app.state.session_factory() as db:
            return db.get(ChatRoom, room_id)

    return _fetch


@pytest.fixture
def make_room(client: TestClient) -> Callable[..., None]:
    def _make(room_name: str = "general", password: str = "p") -> None:
        res = client.post(
            "/room/create",
            json={"room_id": None, "room_name": room_name, "password": password, "user_id": None},
        )
        assert res.json()["data"] is True

    return _make
