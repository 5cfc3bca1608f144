"""Request interceptors applied around the route dispatcher.

``build_middleware`` returns an explicit, ordered list (outermost first)
that is handed to the FastAPI constructor.
"""

import logging
import time

from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from store_probe.config import Settings

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Log method, path, status code and duration of each HTTP request."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        status_code = 500

        async def send_with_status(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_with_status)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "%s %s -> %d (%.1f ms)",
                scope["method"],
                scope["path"],
                status_code,
                duration_ms,
            )


def build_middleware(settings: Settings) -> list[Middleware]:
    """Build the ordered interceptor list enabled by settings.

    Order: request logging, then CORS.
    """
    middleware: list[Middleware] = []

    if settings.request_logging:
        middleware.append(Middleware(RequestLoggingMiddleware))

    if settings.cors_enabled:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=list(settings.cors_allow_origins),
                allow_methods=["GET", "OPTIONS"],
                allow_headers=["*"],
            )
        )

    return middleware
