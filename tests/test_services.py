"""
Tests for the round trip services.
"""

import pytest

from conftest import BrokenDocumentStore, BrokenKeyValueStore, InMemoryDocumentStore, InMemoryKeyValueStore
from store_probe.entities import Connected, Unavailable
from store_probe.errors import DependencyCallError, ServiceUnavailableError
from store_probe.services import CacheService, DocumentService


def test_document_round_trip():
    """The record read back matches the one written."""
    store = InMemoryDocumentStore()
    service = DocumentService(Connected(store))

    record = service.round_trip()

    assert service.is_available
    assert record.collection == "test"
    assert record.document_id == "example"
    assert record.fields["message"] == "Hello from Fiber!"
    assert record.fields["source"] == "fiber-app"
    assert record.fields == store.documents[("test", "example")]


def test_document_unavailable():
    """An unavailable store raises without touching any client."""
    service = DocumentService(Unavailable("not configured"))

    assert not service.is_available
    with pytest.raises(ServiceUnavailableError) as exc_info:
        service.round_trip()
    assert exc_info.value.status_code == 503


def test_document_write_failure_skips_read():
    """A failed write is reported and no read follows."""
    store = BrokenDocumentStore("upsert")
    service = DocumentService(Connected(store))

    with pytest.raises(DependencyCallError, match="Failed to write to Firestore"):
        service.round_trip()
    assert store.calls == []


def test_cache_round_trip():
    """The fixed key is written with a 10 minute TTL and read back."""
    store = InMemoryKeyValueStore()
    service = CacheService(Connected(store))

    entry = service.round_trip()

    assert entry.key == "fiber:test:key"
    assert entry.value == "Hello from Fiber Redis!"
    assert entry.ttl == 600
    assert store.ttls["fiber:test:key"] == 600


def test_cache_unavailable():
    service = CacheService(Unavailable("connection refused"))

    assert not service.is_available
    with pytest.raises(ServiceUnavailableError, match="Redis service unavailable"):
        service.round_trip()


def test_cache_miss_is_read_failure():
    """A miss right after the write is reported as a read failure."""
    service = CacheService(Connected(BrokenKeyValueStore("miss")))

    with pytest.raises(DependencyCallError, match="Failed to read from Redis: key 'fiber:test:key' not found"):
        service.round_trip()
