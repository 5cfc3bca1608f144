"""Store Probe - round-trip probes for Firestore and Redis over HTTP.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (DocumentStore, KeyValueStore)
    - repositories: Firestore and Redis adapters
    - services: Write-then-read round trips on fixed identifiers
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal), including adapter availability

Usage:
    ```python
    from store_probe.repositories import RedisCacheRepository
    from store_probe.services import CacheService

    cache = CacheService(RedisCacheRepository.connect("localhost:6379"))
    entry = cache.round_trip()
    ```

For HTTP API:
    ```python
    from store_probe.api.app import create_app
    ```

Or from the command line: ``python -m store_probe``.
"""

__version__ = "0.1.0"

from store_probe.config import Settings, get_settings  # noqa: E402
from store_probe.entities import (  # noqa: E402
    Availability,
    CacheEntryEntity,
    Connected,
    DocumentRecordEntity,
    Unavailable,
)
from store_probe.errors import DependencyCallError, ServiceError, ServiceUnavailableError  # noqa: E402
from store_probe.handlers import ProbeHandler  # noqa: E402
from store_probe.protocols import DocumentStore, KeyValueStore  # noqa: E402
from store_probe.repositories import FirestoreDocumentRepository, RedisCacheRepository  # noqa: E402
from store_probe.services import CacheService, DocumentService  # noqa: E402

__all__ = [
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    # Protocols (interfaces)
    "DocumentStore",
    "KeyValueStore",
    # Services (business logic)
    "CacheService",
    "DocumentService",
    # Handlers (HTTP)
    "ProbeHandler",
    # Repositories (data access)
    "FirestoreDocumentRepository",
    "RedisCacheRepository",
    # Entities (domain models)
    "Availability",
    "Connected",
    "Unavailable",
    "CacheEntryEntity",
    "DocumentRecordEntity",
    # Errors
    "ServiceError",
    "ServiceUnavailableError",
    "DependencyCallError",
]
