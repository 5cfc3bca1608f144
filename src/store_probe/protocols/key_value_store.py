"""Key-value storage protocol.

Defines the interface for an expiring key-value cache (Redis by default).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for key-value cache backends."""

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value that expires after ``ttl`` seconds."""
        ...

    def get(self, key: str) -> str | None:
        """Read a value.

        Returns:
            The stored value, or None on a cache miss
        """
        ...

    def close(self) -> None:
        """Release the underlying connection pool."""
        ...
