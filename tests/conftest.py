"""Shared fixtures and in-memory stand-ins for the external stores."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from store_probe.api.app import create_app
from store_probe.config import Settings
from store_probe.entities import Connected, Unavailable


class InMemoryDocumentStore:
    """DocumentStore backed by a dict."""

    def __init__(self) -> None:
        self.documents: dict[tuple[str, str], dict[str, Any]] = {}
        self.calls: list[tuple[str, str, str]] = []
        self.closed = False

    def upsert(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        self.calls.append(("upsert", collection, document_id))
        self.documents[(collection, document_id)] = dict(fields)

    def fetch(self, collection: str, document_id: str) -> dict[str, Any]:
        self.calls.append(("fetch", collection, document_id))
        try:
            return dict(self.documents[(collection, document_id)])
        except KeyError:
            raise LookupError(f"document {collection}/{document_id} does not exist") from None

    def close(self) -> None:
        self.closed = True


class InMemoryKeyValueStore:
    """KeyValueStore backed by a dict, recording TTLs."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.closed = False

    def set(self, key: str, value: str, ttl: int) -> None:
        self.values[key] = value
        self.ttls[key] = ttl

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def close(self) -> None:
        self.closed = True


class BrokenDocumentStore(InMemoryDocumentStore):
    """DocumentStore whose writes or reads fail."""

    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self.fail_on = fail_on

    def upsert(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        if self.fail_on == "upsert":
            raise ConnectionError("deadline exceeded")
        super().upsert(collection, document_id, fields)

    def fetch(self, collection: str, document_id: str) -> dict[str, Any]:
        if self.fail_on == "fetch":
            raise ConnectionError("deadline exceeded")
        if self.fail_on == "missing":
            raise LookupError(f"document {collection}/{document_id} does not exist")
        return super().fetch(collection, document_id)


class BrokenKeyValueStore(InMemoryKeyValueStore):
    """KeyValueStore whose writes or reads fail, or that loses every value."""

    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self.fail_on = fail_on

    def set(self, key: str, value: str, ttl: int) -> None:
        if self.fail_on == "set":
            raise ConnectionError("connection reset by peer")
        if self.fail_on != "miss":
            super().set(key, value, ttl)

    def get(self, key: str) -> str | None:
        if self.fail_on == "get":
            raise ConnectionError("connection reset by peer")
        return super().get(key)


@pytest.fixture
def settings():
    """Settings independent of the developer's environment."""
    return Settings(
        service_name="Store Probe Test",
        firebase_service_account_json="",
        redis_url="localhost:6379",
        redis_password="",
        request_logging=True,
        cors_allow_origins=(),
    )


@pytest.fixture
def document_store():
    return InMemoryDocumentStore()


@pytest.fixture
def cache_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def make_client(settings):
    """Build a TestClient around an app with the given adapter states.

    The lifespan runs, so the adapters are installed exactly as at startup.
    """
    clients: list[TestClient] = []

    def _make(document=None, cache=None, app_settings=None) -> TestClient:
        app = create_app(
            settings=app_settings or settings,
            document_store=Connected(document) if document is not None else Unavailable("not configured"),
            cache_store=Connected(cache) if cache is not None else Unavailable("not configured"),
        )
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
