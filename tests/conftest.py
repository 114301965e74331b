"""Shared pytest fixtures."""

import copy
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from typing import Any
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from eventboard.app import App
from eventboard.config import Config
from eventboard.core.core import Core
from eventboard.web.server import create_fastapi_app

ADMIN_PASSWORD = "admin"


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


class FakeCursor:
    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda doc: doc[key], reverse=direction < 0)
        return self

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self._documents:
            yield document


class FakeCollection:
    """In-memory stand-in for the parts of an async MongoDB collection the event service uses."""

    def __init__(self) -> None:
        self.documents: dict[UUID, dict[str, Any]] = {}

    async def create_index(self, *args: Any, **kwargs: Any) -> str:
        return "index"

    async def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        self.documents[document["_id"]] = copy.deepcopy(document)
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        document = self.documents.get(query["_id"])
        return copy.deepcopy(document) if document is not None else None

    def find(self, query: dict[str, Any] | None = None) -> FakeCursor:
        matching = [copy.deepcopy(doc) for doc in self.documents.values() if _matches(doc, query or {})]
        return FakeCursor(matching)

    async def update_one(self, query: dict[str, Any], update: dict[str, Any]) -> SimpleNamespace:
        document = self.documents.get(query["_id"])
        if document is None:
            return SimpleNamespace(matched_count=0)
        document.update(copy.deepcopy(update["$set"]))
        return SimpleNamespace(matched_count=1)

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        removed = self.documents.pop(query["_id"], None)
        return SimpleNamespace(deleted_count=0 if removed is None else 1)


def _matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
    for field, condition in query.items():
        if isinstance(condition, dict):
            if "$gte" in condition and not document[field] >= condition["$gte"]:
                return False
        elif document.get(field) != condition:
            return False
    return True


@pytest.fixture
def config():
    """Configuration that never needs a running MongoDB."""
    return Config(database_url="mongodb://localhost:27017/eventboard_test", admin_password=ADMIN_PASSWORD)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def core(config, clock):
    return Core(config, clock)


@pytest.fixture
def session_service(core):
    return core.services.session


@pytest.fixture
def events_collection():
    return FakeCollection()


@pytest.fixture
def app(config, clock, events_collection, monkeypatch):
    app = App(config, clock)
    monkeypatch.setattr(app._core.services.event, "_collection", events_collection)
    return app


@pytest.fixture
def client(app, config):
    """HTTP client; the lifespan is not run, so no database connection is made."""
    return TestClient(create_fastapi_app(app, config))


@pytest.fixture
def auth_headers(client):
    """Authorization header for a freshly logged-in admin."""
    response = client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    return {"Authorization": f"Bearer {response.json()['token']}"}
