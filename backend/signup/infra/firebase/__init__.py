"""Firebase adapters for the registration ports."""

from __future__ import annotations

from .auth_provider import FirebaseIdentityProvider
from .firestore_store import FirestoreDocumentStore
from .storage_store import CloudStorageBlobStore

__all__ = ["CloudStorageBlobStore", "FirebaseIdentityProvider", "FirestoreDocumentStore"]
