"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .availability import Availability, Connected, Unavailable
from .cache_entry import CacheEntryEntity
from .document_record import DocumentRecordEntity

__all__ = [
    "Availability",
    "Connected",
    "Unavailable",
    "CacheEntryEntity",
    "DocumentRecordEntity",
]
