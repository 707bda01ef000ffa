"""
signup.services._shared.ports
=============================

Collection of *ports* (hexagonal interfaces) that define the contracts for the
external collaborators of the registration flow.

Modules
-------
- :mod:`identity_provider`:
    Defines :class:`~.IdentityProvider`, the account registry (email lookup and
    account creation).

- :mod:`document_store`:
    Defines :class:`~.DocumentStore`, keyed profile persistence.

- :mod:`blob_store`:
    Defines :class:`~.BlobStore`, binary uploads addressed by path.

- :mod:`storage_permission`:
    Defines :class:`~.StoragePermission`, whether images may be read at all.

- :mod:`notifier`:
    Defines :class:`~.Notifier` and :class:`~.Notification`, transient
    user-facing messages.

Design Notes
------------
Concrete Firebase adapters live under ``signup.infra.firebase``; the
``InMemory*`` doubles here back the ``memory`` backend and unit tests.
"""

from __future__ import annotations

from .blob_store import BlobStore, InMemoryBlobStore
from .document_store import DocumentStore, InMemoryDocumentStore
from .identity_provider import IdentityProvider, InMemoryIdentityProvider
from .notifier import CollectingNotifier, Notification, NotificationLevel, Notifier
from .storage_permission import StaticStoragePermission, StoragePermission

__all__ = [
    "BlobStore",
    "CollectingNotifier",
    "DocumentStore",
    "IdentityProvider",
    "InMemoryBlobStore",
    "InMemoryDocumentStore",
    "InMemoryIdentityProvider",
    "Notification",
    "NotificationLevel",
    "Notifier",
    "StaticStoragePermission",
    "StoragePermission",
]
