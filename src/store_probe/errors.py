"""Errors surfaced to HTTP clients.

Handlers and services raise these; the API layer turns them into the JSON
error envelope ``{"error": ..., "message": ...}``.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map to an HTTP error response.

    Attributes:
        status_code: HTTP status returned to the client
        error: Short error text (the ``error`` key of the response)
        message: Optional longer explanation (the ``message`` key)
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str, message: str | None = None) -> None:
        super().__init__(error)
        self.error = error
        self.message = message


class ServiceUnavailableError(ServiceError):
    """A dependency was not configured or not reachable at startup."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class DependencyCallError(ServiceError):
    """A call into a connected dependency failed during a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
