"""Document record domain entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocumentRecordEntity:
    """Domain entity for a document addressed by collection and id.

    Attributes:
        collection: Name of the collection holding the document
        document_id: Id of the document inside the collection
        fields: Unstructured mapping of field name to value
    """

    collection: str
    document_id: str
    fields: dict[str, Any] = field(default_factory=dict)
