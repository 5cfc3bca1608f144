"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .responses import (
    CacheData,
    CacheResponse,
    DocumentResponse,
    ErrorResponse,
    HealthResponse,
    RootResponse,
    ServicesStatus,
)

__all__ = [
    "CacheData",
    "CacheResponse",
    "DocumentResponse",
    "ErrorResponse",
    "HealthResponse",
    "RootResponse",
    "ServicesStatus",
]
