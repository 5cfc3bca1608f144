"""Redis implementation of KeyValueStore.

Wraps a synchronous redis-py client. The connection is verified once with
PING when the repository is created; a failed probe leaves the cache
unavailable for the lifetime of the process.
"""

import logging

import redis

from store_probe.entities import Availability, Connected, Unavailable

logger = logging.getLogger(__name__)

DEFAULT_REDIS_PORT = 6379


def build_redis_client(address: str, password: str = "", timeout: float = 10.0) -> redis.Redis:
    """Create a Redis client for ``address``.

    ``address`` is either ``host:port`` (port defaults to 6379) or a
    ``redis://`` / ``rediss://`` URL. An empty password disables AUTH.

    Raises:
        ValueError: If the address cannot be parsed
    """
    options = {
        "password": password or None,
        "socket_timeout": timeout,
        "socket_connect_timeout": timeout,
        "decode_responses": True,
    }

    if "://" in address:
        return redis.from_url(address, **options)

    host, sep, port = address.rpartition(":")
    if not sep:
        host, port = address, ""
    if not host:
        raise ValueError("empty Redis address")
    try:
        port_number = int(port) if port else DEFAULT_REDIS_PORT
    except ValueError:
        raise ValueError(f"invalid port in Redis address: {address!r}") from None

    return redis.Redis(host=host, port=port_number, db=0, **options)


class RedisCacheRepository:
    """Redis implementation of the KeyValueStore protocol.

    This class satisfies the protocol through structural typing,
    no explicit inheritance needed.
    """

    def __init__(self, redis_client: redis.Redis) -> None:
        """Initialize the repository.

        Args:
            redis_client: A configured redis-py client
        """
        self._client = redis_client

    @classmethod
    def connect(
        cls,
        address: str,
        password: str = "",
        timeout: float = 10.0,
    ) -> Availability["RedisCacheRepository"]:
        """Create a repository and verify it with PING.

        Args:
            address: ``host:port`` or a Redis URL
            password: Redis password, empty for none
            timeout: Socket and connect timeout in seconds

        Returns:
            Connected(repository) on success, Unavailable otherwise
        """
        try:
            client = build_redis_client(address, password, timeout)
        except ValueError as e:
            logger.warning("Invalid Redis address %r: %s", address, e)
            logger.warning("Continuing without Redis...")
            return Unavailable(f"invalid Redis address: {e}")

        repository = cls(client)
        if not repository.ping():
            logger.warning("Continuing without Redis...")
            repository.close()
            return Unavailable(f"Redis connection failed: PING to {address} failed")

        logger.info("Redis client initialized successfully")
        return Connected(repository)

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key`` with an expiry of ``ttl`` seconds."""
        self._client.set(key, value, ex=ttl)

    def get(self, key: str) -> str | None:
        """Read ``key``, returning None on a miss."""
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode()
        return value

    def ping(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis connection failed: %s", e)
            return False

    def close(self) -> None:
        self._client.close()
