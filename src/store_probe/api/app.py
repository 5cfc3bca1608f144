import logging

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from store_probe import __version__
from store_probe.api.dependencies import HandlerDep, make_lifespan
from store_probe.api.middleware import build_middleware
from store_probe.config import Settings, get_settings
from store_probe.dto import CacheResponse, DocumentResponse, ErrorResponse, HealthResponse, RootResponse
from store_probe.entities import Availability
from store_probe.errors import DependencyCallError, ServiceError
from store_probe.logging_config import configure_logging
from store_probe.protocols import DocumentStore, KeyValueStore

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Dependency call failed"},
    503: {"model": ErrorResponse, "description": "Dependency unavailable"},
}

router = APIRouter()


@router.get("/", response_model=RootResponse)
def root(handler: HandlerDep) -> RootResponse:
    """Root endpoint with greeting and dependency status."""
    return handler.root()


@router.get("/health", response_model=HealthResponse)
def health(handler: HandlerDep) -> HealthResponse:
    """Health check endpoint."""
    return handler.health()


@router.get("/firebase", response_model=DocumentResponse, responses=ERROR_RESPONSES)
def firebase_round_trip(handler: HandlerDep) -> DocumentResponse:
    """Write the test document to Firestore and read it back."""
    return handler.firebase()


@router.get("/redis", response_model=CacheResponse, responses=ERROR_RESPONSES)
def redis_round_trip(handler: HandlerDep) -> CacheResponse:
    """Write the test key to Redis and read it back."""
    return handler.redis()


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a ServiceError as the JSON error envelope."""
    if isinstance(exc, DependencyCallError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.error)
    body = ErrorResponse(error=exc.error, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


def create_app(
    settings: Settings | None = None,
    document_store: Availability[DocumentStore] | None = None,
    cache_store: Availability[KeyValueStore] | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings. Defaults to the cached environment settings.
        document_store: Pre-resolved document store; connected from settings if None.
        cache_store: Pre-resolved cache; connected from settings if None.

    Returns:
        The configured FastAPI app
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.service_name,
        description="Probe service round-tripping data through Firestore and Redis",
        version=__version__,
        lifespan=make_lifespan(settings, document_store, cache_store),
        middleware=build_middleware(settings),
    )
    app.add_exception_handler(ServiceError, service_error_handler)  # type: ignore[arg-type]
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    """Run the module-level app with uvicorn until the process is terminated.

    A failure to bind the listener makes uvicorn exit with a non-zero status.
    """
    settings = get_settings()
    logger.info("Server starting on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
