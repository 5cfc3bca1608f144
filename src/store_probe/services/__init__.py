"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
and on the availability decided at startup.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cache_service import CacheService
from .document_service import DocumentService

__all__ = [
    "CacheService",
    "DocumentService",
]
