from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import firebase_admin
from firebase_admin import firestore

from signup.services._shared.errors import ProviderError
from signup.services._shared.ports import DocumentStore

from ._errors import TRANSPORT_ERRORS, provider_message

log = logging.getLogger(__name__)


class FirestoreDocumentStore(DocumentStore):
    """Document store backed by Cloud Firestore (``collection/document`` sets)."""

    def __init__(self, app: firebase_admin.App | None = None, client: Any | None = None) -> None:
        self.app = app
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = firestore.client(app=self.app)
        return self._client

    def write_document(
        self, collection: str, document_id: str, fields: Mapping[str, Any]
    ) -> None:
        try:
            self.client.collection(collection).document(document_id).set(dict(fields))
        except TRANSPORT_ERRORS as exc:
            log.warning("firestore.set_failed: %s/%s", collection, document_id)
            raise ProviderError(provider_message(exc)) from exc
