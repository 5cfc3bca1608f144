"""
Tests for the Redis adapter.
"""

from unittest.mock import MagicMock

import pytest
import redis

from store_probe.entities import Connected, Unavailable
from store_probe.repositories import RedisCacheRepository, build_redis_client
from store_probe.repositories import redis_repository


def test_build_client_from_host_port():
    """A host:port address maps to host, port and db 0."""
    client = build_redis_client("cache.internal:6380", password="secret", timeout=2.5)
    kwargs = client.connection_pool.connection_kwargs
    assert kwargs["host"] == "cache.internal"
    assert kwargs["port"] == 6380
    assert kwargs["db"] == 0
    assert kwargs["password"] == "secret"
    assert kwargs["socket_timeout"] == 2.5


def test_build_client_default_port():
    """A bare host uses the standard port and no password."""
    kwargs = build_redis_client("localhost").connection_pool.connection_kwargs
    assert kwargs["host"] == "localhost"
    assert kwargs["port"] == 6379
    assert kwargs["password"] is None


def test_build_client_from_url():
    """Redis URLs are accepted as well."""
    kwargs = build_redis_client("redis://cache.internal:6381/0").connection_pool.connection_kwargs
    assert kwargs["host"] == "cache.internal"
    assert kwargs["port"] == 6381


@pytest.mark.parametrize("address", ["", ":6379", "localhost:port"])
def test_build_client_invalid_address(address):
    with pytest.raises(ValueError):
        build_redis_client(address)


def test_connect_success(monkeypatch):
    """A successful PING yields a connected repository."""
    client = MagicMock()
    client.ping.return_value = True
    monkeypatch.setattr(redis_repository, "build_redis_client", lambda *args, **kwargs: client)

    result = RedisCacheRepository.connect("localhost:6379")

    assert isinstance(result, Connected)
    assert isinstance(result.handle, RedisCacheRepository)
    result.handle.set("k", "v", 60)
    client.set.assert_called_once_with("k", "v", ex=60)
    client.ping.assert_called_once()


def test_connect_ping_failure(monkeypatch):
    """A failed PING leaves Redis unavailable and closes the client."""
    client = MagicMock()
    client.ping.side_effect = redis.ConnectionError("Connection refused")
    monkeypatch.setattr(redis_repository, "build_redis_client", lambda *args, **kwargs: client)

    result = RedisCacheRepository.connect("localhost:6379")

    assert isinstance(result, Unavailable)
    assert "PING" in result.reason
    client.close.assert_called_once()


def test_connect_invalid_address():
    """A malformed address is not fatal."""
    result = RedisCacheRepository.connect("localhost:not-a-port")
    assert isinstance(result, Unavailable)


def test_set_and_get():
    """Values are written with an expiry and read back."""
    client = MagicMock()
    client.get.return_value = "Hello"
    repository = RedisCacheRepository(client)

    repository.set("k", "Hello", 600)
    value = repository.get("k")

    client.set.assert_called_once_with("k", "Hello", ex=600)
    assert value == "Hello"


def test_get_decodes_bytes_and_misses():
    client = MagicMock()
    client.get.side_effect = [b"raw", None]
    repository = RedisCacheRepository(client)

    assert repository.get("k") == "raw"
    assert repository.get("k") is None


def test_ping_failure_is_false():
    client = MagicMock()
    client.ping.side_effect = redis.TimeoutError("timed out")
    assert RedisCacheRepository(client).ping() is False
