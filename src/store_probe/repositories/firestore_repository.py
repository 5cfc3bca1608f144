"""Firestore implementation of DocumentStore.

Uses the Firebase Admin SDK with a service account credential passed as a
JSON string. Each connection registers its own named Firebase app, so
several repositories can live in one process.
"""

import json
import logging
import uuid
from typing import Any

import firebase_admin
from firebase_admin import credentials, firestore

from store_probe.entities import Availability, Connected, Unavailable

logger = logging.getLogger(__name__)


class FirestoreDocumentRepository:
    """Firestore implementation of the DocumentStore protocol.

    This class satisfies the protocol through structural typing,
    no explicit inheritance needed.
    """

    def __init__(
        self,
        client: Any,
        app: firebase_admin.App | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize the repository.

        Args:
            client: A ``google.cloud.firestore.Client``
            app: The Firebase app owning the client, deleted on close
            timeout: Timeout in seconds for each Firestore call
        """
        self._client = client
        self._app = app
        self._timeout = timeout

    @classmethod
    def connect(
        cls,
        credentials_json: str,
        timeout: float = 10.0,
    ) -> Availability["FirestoreDocumentRepository"]:
        """Initialize Firebase from a service account JSON payload.

        A missing or malformed credential, or any SDK initialization
        failure, is logged and reported as Unavailable.

        Args:
            credentials_json: Service account JSON, empty if not configured
            timeout: Timeout in seconds for each Firestore call

        Returns:
            Connected(repository) on success, Unavailable otherwise
        """
        if not credentials_json:
            logger.warning("FIREBASE_SERVICE_ACCOUNT_JSON environment variable not set")
            logger.warning("Firebase features will not be available")
            return Unavailable("FIREBASE_SERVICE_ACCOUNT_JSON not set")

        try:
            service_account = json.loads(credentials_json)
        except json.JSONDecodeError as e:
            logger.warning("Failed to parse Firebase service account JSON: %s", e)
            logger.warning("Continuing without Firebase...")
            return Unavailable(f"invalid service account JSON: {e}")

        if not isinstance(service_account, dict):
            logger.warning("Firebase service account JSON must be an object")
            logger.warning("Continuing without Firebase...")
            return Unavailable("service account JSON is not an object")

        try:
            app = firebase_admin.initialize_app(
                credentials.Certificate(service_account),
                name=f"store-probe-{uuid.uuid4().hex}",
            )
        except Exception as e:
            logger.warning("Firebase initialization failed: %s", e)
            logger.warning("Continuing without Firebase...")
            return Unavailable(f"Firebase initialization failed: {e}")

        try:
            client = firestore.client(app)
        except Exception as e:
            logger.warning("Firestore client creation failed: %s", e)
            logger.warning("Continuing without Firebase...")
            firebase_admin.delete_app(app)
            return Unavailable(f"Firestore client creation failed: {e}")

        logger.info("Firebase Firestore initialized successfully")
        return Connected(cls(client, app=app, timeout=timeout))

    def upsert(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        """Create or overwrite ``collection/document_id`` with ``fields``."""
        self._client.collection(collection).document(document_id).set(
            fields, timeout=self._timeout
        )

    def fetch(self, collection: str, document_id: str) -> dict[str, Any]:
        """Read ``collection/document_id``.

        Raises:
            LookupError: If the document does not exist
        """
        snapshot = self._client.collection(collection).document(document_id).get(
            timeout=self._timeout
        )
        if not snapshot.exists:
            raise LookupError(f"document {collection}/{document_id} does not exist")
        return snapshot.to_dict() or {}

    def close(self) -> None:
        self._client.close()
        if self._app is not None:
            firebase_admin.delete_app(self._app)
            self._app = None
