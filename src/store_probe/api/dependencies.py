"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Adapters are connected once in the lifespan, before requests are served
    - The resulting ServiceContainer is stored in app.state and never mutated
    - Dependency functions retrieve it from request.app.state
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from store_probe.config import Settings
from store_probe.entities import Availability, Connected
from store_probe.handlers import ProbeHandler
from store_probe.protocols import DocumentStore, KeyValueStore
from store_probe.repositories import FirestoreDocumentRepository, RedisCacheRepository
from store_probe.services import CacheService, DocumentService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceContainer:
    """Everything a request needs, built once at startup.

    Attributes:
        document_service: Firestore round trip service
        cache_service: Redis round trip service
        handler: HTTP handler bound to both services
    """

    document_service: DocumentService
    cache_service: CacheService
    handler: ProbeHandler

    def close(self) -> None:
        """Release every connected adapter."""
        for availability in (self.document_service.store, self.cache_service.store):
            if isinstance(availability, Connected):
                availability.handle.close()


def build_container(
    settings: Settings,
    document_store: Availability[DocumentStore] | None = None,
    cache_store: Availability[KeyValueStore] | None = None,
) -> ServiceContainer:
    """Connect the adapters and assemble the container.

    Adapters passed in explicitly are used as-is; the others are connected
    from settings. Each adapter is optional and resolved independently.

    Args:
        settings: Application settings
        document_store: Pre-resolved document store availability
        cache_store: Pre-resolved cache availability

    Returns:
        The assembled ServiceContainer
    """
    if document_store is None:
        document_store = FirestoreDocumentRepository.connect(
            settings.firebase_service_account_json,
            timeout=settings.request_timeout,
        )
    if cache_store is None:
        cache_store = RedisCacheRepository.connect(
            settings.redis_url,
            password=settings.redis_password,
            timeout=settings.request_timeout,
        )

    document_service = DocumentService(document_store)
    cache_service = CacheService(cache_store)
    handler = ProbeHandler(
        document_service=document_service,
        cache_service=cache_service,
        service_name=settings.service_name,
    )
    return ServiceContainer(
        document_service=document_service,
        cache_service=cache_service,
        handler=handler,
    )


def make_lifespan(
    settings: Settings,
    document_store: Availability[DocumentStore] | None = None,
    cache_store: Availability[KeyValueStore] | None = None,
):
    """Build the lifespan context manager for a FastAPI app.

    Args:
        settings: Application settings
        document_store: Optional pre-resolved document store (for testing)
        cache_store: Optional pre-resolved cache (for testing)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container = build_container(settings, document_store, cache_store)
        app.state.container = container

        status = container.handler.services_status()
        logger.info("Firebase available: %s", status.firebase)
        logger.info("Redis available: %s", status.redis)

        yield

        container.close()
        del app.state.container
        logger.info("Adapters released")

    return lifespan


def get_container(request: Request) -> ServiceContainer:
    """Dependency injection for ServiceContainer from app.state.

    Raises:
        RuntimeError: If the container is not initialized
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("ServiceContainer not initialized. Check lifespan setup.")
    return container


def get_handler(request: Request) -> ProbeHandler:
    """Dependency injection for ProbeHandler from app.state."""
    return get_container(request).handler


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[ProbeHandler, Depends(get_handler)]
