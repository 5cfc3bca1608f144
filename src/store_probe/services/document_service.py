"""Document service: write-then-read round trip on a fixed document."""

from datetime import datetime, timezone

from store_probe.entities import Availability, DocumentRecordEntity, Unavailable
from store_probe.errors import DependencyCallError, ServiceUnavailableError
from store_probe.protocols import DocumentStore

TEST_COLLECTION = "test"
TEST_DOCUMENT_ID = "example"
TEST_MESSAGE = "Hello from Fiber!"
TEST_SOURCE = "fiber-app"

UNAVAILABLE_ERROR = "Firebase service unavailable"
UNAVAILABLE_MESSAGE = (
    "Please check Firebase configuration and ensure "
    "FIREBASE_SERVICE_ACCOUNT_JSON environment variable is set"
)


class DocumentService:
    """Round trips a fixed test document through the document store.

    Example:
        ```python
        repository = FirestoreDocumentRepository.connect(settings.firebase_service_account_json)
        service = DocumentService(repository)
        record = service.round_trip()
        ```
    """

    def __init__(self, store: Availability[DocumentStore]) -> None:
        """Initialize the document service.

        Args:
            store: Connected document store, or Unavailable
        """
        self._store = store

    @property
    def is_available(self) -> bool:
        return self._store.is_available

    @property
    def store(self) -> Availability[DocumentStore]:
        """Get the underlying availability (for testing and shutdown)."""
        return self._store

    def round_trip(self) -> DocumentRecordEntity:
        """Write the test document and read it back.

        Returns:
            The record as read back from the store

        Raises:
            ServiceUnavailableError: If the store is unavailable
            DependencyCallError: If the write, the read or the decode fails
        """
        if isinstance(self._store, Unavailable):
            raise ServiceUnavailableError(UNAVAILABLE_ERROR, UNAVAILABLE_MESSAGE)

        store = self._store.handle
        fields = {
            "message": TEST_MESSAGE,
            "timestamp": datetime.now(timezone.utc),
            "source": TEST_SOURCE,
        }

        try:
            store.upsert(TEST_COLLECTION, TEST_DOCUMENT_ID, fields)
        except Exception as e:
            raise DependencyCallError(f"Failed to write to Firestore: {e}") from e

        try:
            data = store.fetch(TEST_COLLECTION, TEST_DOCUMENT_ID)
        except LookupError as e:
            raise DependencyCallError(f"Failed to parse Firestore data: {e}") from e
        except Exception as e:
            raise DependencyCallError(f"Failed to read from Firestore: {e}") from e

        if not isinstance(data, dict):
            raise DependencyCallError(
                f"Failed to parse Firestore data: expected a mapping, got {type(data).__name__}"
            )

        return DocumentRecordEntity(
            collection=TEST_COLLECTION,
            document_id=TEST_DOCUMENT_ID,
            fields=data,
        )
