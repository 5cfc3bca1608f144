"""Response DTOs for API endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ServicesStatus(BaseModel):
    """Availability of each external dependency, decided at startup."""

    firebase: bool = Field(..., description="Whether the Firestore adapter is connected")
    redis: bool = Field(..., description="Whether the Redis adapter is connected")


class RootResponse(BaseModel):
    """Response DTO for the root endpoint."""

    message: str = Field(..., description="Static greeting")
    service: str = Field(..., description="Service name")
    services: ServicesStatus
    endpoints: dict[str, str] = Field(default_factory=dict, description="Available routes")


class HealthResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Always 'ok' while the process serves requests")
    timestamp: datetime = Field(..., description="Server time (UTC)")
    service: str = Field(..., description="Service name")


class DocumentResponse(BaseModel):
    """Response DTO for the Firestore round trip."""

    message: str = Field(..., description="Human-readable status message")
    data: dict[str, Any] = Field(..., description="Document fields as read back from Firestore")


class CacheData(BaseModel):
    """Key and value read back from the cache."""

    key: str
    value: str


class CacheResponse(BaseModel):
    """Response DTO for the Redis round trip."""

    message: str = Field(..., description="Human-readable status message")
    data: CacheData


class ErrorResponse(BaseModel):
    """Error envelope for 5xx responses."""

    error: str = Field(..., description="Short error text")
    message: str | None = Field(None, description="Longer explanation, when available")
