"""Repository layer for data access.

This layer wraps the external dependencies (Firestore, Redis) behind
protocol-based interfaces. The repositories are protocol-based
(structural typing), not inheritance-based.
"""

from store_probe.protocols import DocumentStore, KeyValueStore

from .firestore_repository import FirestoreDocumentRepository
from .redis_repository import RedisCacheRepository, build_redis_client

__all__ = [
    "DocumentStore",
    "KeyValueStore",
    "FirestoreDocumentRepository",
    "RedisCacheRepository",
    "build_redis_client",
]
