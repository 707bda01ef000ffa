from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class DocumentStore(Protocol):
    """Port for a keyed document database (collection / document id / fields)."""

    def write_document(
        self, collection: str, document_id: str, fields: Mapping[str, Any]
    ) -> None:
        """Create or overwrite ``collection/document_id`` with ``fields``."""
        ...


class InMemoryDocumentStore(DocumentStore):
    """Dictionary-backed document store."""

    def __init__(self) -> None:
        self._docs: dict[tuple[str, str], dict[str, Any]] = {}

    def write_document(
        self, collection: str, document_id: str, fields: Mapping[str, Any]
    ) -> None:
        self._docs[(collection, document_id)] = dict(fields)

    def get(self, collection: str, document_id: str) -> dict[str, Any] | None:
        doc = self._docs.get((collection, document_id))
        return dict(doc) if doc is not None else None
