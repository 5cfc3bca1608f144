"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the Firestore or Redis adapters for in-memory fakes in tests
- Clear separation between services and data access
"""

from .document_store import DocumentStore
from .key_value_store import KeyValueStore

__all__ = [
    "DocumentStore",
    "KeyValueStore",
]
