"""Document storage protocol.

Defines the interface for a document database addressed by
collection name and document id (Firestore by default).
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def upsert(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        """Create or overwrite a document.

        Args:
            collection: Collection name
            document_id: Document id inside the collection
            fields: Full document contents
        """
        ...

    def fetch(self, collection: str, document_id: str) -> dict[str, Any]:
        """Read a document.

        Args:
            collection: Collection name
            document_id: Document id inside the collection

        Returns:
            The document fields

        Raises:
            LookupError: If the document does not exist
        """
        ...

    def close(self) -> None:
        """Release the underlying client."""
        ...
