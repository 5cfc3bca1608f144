"""Cache service: write-then-read round trip on a fixed key."""

from store_probe.entities import Availability, CacheEntryEntity, Unavailable
from store_probe.errors import DependencyCallError, ServiceUnavailableError
from store_probe.protocols import KeyValueStore

TEST_KEY = "fiber:test:key"
TEST_VALUE = "Hello from Fiber Redis!"
TEST_TTL = 10 * 60  # 10 minutes

UNAVAILABLE_ERROR = "Redis service unavailable"
UNAVAILABLE_MESSAGE = "Please ensure Redis server is configured with REDIS_URL environment variable"


class CacheService:
    """Round trips a fixed key through the key-value cache."""

    def __init__(self, store: Availability[KeyValueStore], ttl: int = TEST_TTL) -> None:
        """Initialize the cache service.

        Args:
            store: Connected cache, or Unavailable
            ttl: Expiry for the written key, in seconds
        """
        self._store = store
        self._ttl = ttl

    @property
    def is_available(self) -> bool:
        return self._store.is_available

    @property
    def store(self) -> Availability[KeyValueStore]:
        """Get the underlying availability (for testing and shutdown)."""
        return self._store

    def round_trip(self) -> CacheEntryEntity:
        """Write the test key and read it back.

        A miss on the read is reported as a read failure.

        Raises:
            ServiceUnavailableError: If the cache is unavailable
            DependencyCallError: If the write or the read fails
        """
        if isinstance(self._store, Unavailable):
            raise ServiceUnavailableError(UNAVAILABLE_ERROR, UNAVAILABLE_MESSAGE)

        store = self._store.handle

        try:
            store.set(TEST_KEY, TEST_VALUE, self._ttl)
        except Exception as e:
            raise DependencyCallError(f"Failed to write to Redis: {e}") from e

        try:
            value = store.get(TEST_KEY)
        except Exception as e:
            raise DependencyCallError(f"Failed to read from Redis: {e}") from e

        if value is None:
            raise DependencyCallError(f"Failed to read from Redis: key {TEST_KEY!r} not found")

        return CacheEntryEntity(key=TEST_KEY, value=value, ttl=self._ttl)
