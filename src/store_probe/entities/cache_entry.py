"""Cache entry domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for a single key/value pair in the cache.

    Attributes:
        key: The cache key
        value: The stored string value
        ttl: Time-to-live in seconds
    """

    key: str
    value: str
    ttl: int
