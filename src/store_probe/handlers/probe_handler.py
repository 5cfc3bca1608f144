"""HTTP handlers for the probe endpoints.

Handlers convert service results into DTOs. Service errors propagate as
ServiceError subclasses and are rendered by the API layer.
"""

from datetime import datetime, timezone

from store_probe.dto import (
    CacheData,
    CacheResponse,
    DocumentResponse,
    HealthResponse,
    RootResponse,
    ServicesStatus,
)
from store_probe.services import CacheService, DocumentService

ENDPOINTS = {
    "health": "/health",
    "firebase": "/firebase",
    "redis": "/redis",
}


class ProbeHandler:
    """HTTP handlers for the root, health, Firestore and Redis routes.

    Example:
        ```python
        handler = ProbeHandler(
            document_service=DocumentService(document_store),
            cache_service=CacheService(cache_store),
            service_name="Store Probe API",
        )

        @app.get("/redis", response_model=CacheResponse)
        def redis_round_trip():
            return handler.redis()
        ```
    """

    def __init__(
        self,
        document_service: DocumentService,
        cache_service: CacheService,
        service_name: str,
    ) -> None:
        """Initialize the probe handler.

        Args:
            document_service: Service for the Firestore round trip
            cache_service: Service for the Redis round trip
            service_name: Name reported by the root and health routes
        """
        self._documents = document_service
        self._cache = cache_service
        self._service_name = service_name

    def services_status(self) -> ServicesStatus:
        return ServicesStatus(
            firebase=self._documents.is_available,
            redis=self._cache.is_available,
        )

    def root(self) -> RootResponse:
        """Handle GET / requests."""
        return RootResponse(
            message="Hello, World!",
            service=self._service_name,
            services=self.services_status(),
            endpoints=ENDPOINTS,
        )

    def health(self) -> HealthResponse:
        """Handle GET /health requests.

        Reports process liveness only; dependency state is on ``/``.
        """
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc),
            service=self._service_name,
        )

    def firebase(self) -> DocumentResponse:
        """Handle GET /firebase requests.

        Raises:
            ServiceUnavailableError: If Firestore is unavailable (503)
            DependencyCallError: If the write, read or decode fails (500)
        """
        record = self._documents.round_trip()
        return DocumentResponse(
            message="Firebase operation completed",
            data=record.fields,
        )

    def redis(self) -> CacheResponse:
        """Handle GET /redis requests.

        Raises:
            ServiceUnavailableError: If Redis is unavailable (503)
            DependencyCallError: If the write or read fails (500)
        """
        entry = self._cache.round_trip()
        return CacheResponse(
            message="Redis operation completed",
            data=CacheData(key=entry.key, value=entry.value),
        )
