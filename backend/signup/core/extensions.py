"""Backend service clients and initialization helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import firebase_admin
from firebase_admin import credentials
from flask import Flask, current_app

from signup.core.config import BACKEND_FIREBASE, BACKEND_MEMORY
from signup.services._shared.ports import (
    BlobStore,
    DocumentStore,
    IdentityProvider,
    InMemoryBlobStore,
    InMemoryDocumentStore,
    InMemoryIdentityProvider,
    StaticStoragePermission,
    StoragePermission,
)

FIREBASE_APP_NAME = "signup"
EXTENSION_KEY = "signup_backends"

log = logging.getLogger(__name__)


@dataclass(slots=True)
class Backends:
    """
    Bundle of the external collaborators used by the registration flow.

    :param name: Backend flavour (``"firebase"`` or ``"memory"``).
    :param identity: Identity provider adapter.
    :param documents: Document store adapter.
    :param blobs: Blob store adapter.
    :param permission: Storage permission service.
    """

    name: str
    identity: IdentityProvider
    documents: DocumentStore
    blobs: BlobStore
    permission: StoragePermission


def init_firebase(app: Flask) -> firebase_admin.App:
    """Return the named Firebase app, initializing it on first use.

    Parameters
    ----------
    app: flask.Flask
        Application providing ``FIREBASE_CREDENTIALS``, ``FIREBASE_PROJECT_ID``
        and ``FIREBASE_STORAGE_BUCKET``.
    """
    try:
        return firebase_admin.get_app(FIREBASE_APP_NAME)
    except ValueError:
        pass

    cred_path = app.config.get("FIREBASE_CREDENTIALS")
    cred = credentials.Certificate(cred_path) if cred_path else credentials.ApplicationDefault()
    options = {
        key: value
        for key, value in {
            "projectId": app.config.get("FIREBASE_PROJECT_ID"),
            "storageBucket": app.config.get("FIREBASE_STORAGE_BUCKET"),
        }.items()
        if value
    }
    log.info("firebase.init", extra={"path": cred_path or "application-default"})
    return firebase_admin.initialize_app(cred, options, name=FIREBASE_APP_NAME)


def build_backends(app: Flask) -> Backends:
    """Instantiate the adapters selected by ``SIGNUP_BACKEND``."""
    name = str(app.config.get("SIGNUP_BACKEND", BACKEND_FIREBASE)).strip().lower()
    permission = StaticStoragePermission(bool(app.config.get("STORAGE_ACCESS_GRANTED", True)))

    if name == BACKEND_MEMORY:
        return Backends(
            name=name,
            identity=InMemoryIdentityProvider(),
            documents=InMemoryDocumentStore(),
            blobs=InMemoryBlobStore(),
            permission=permission,
        )

    if name != BACKEND_FIREBASE:
        raise RuntimeError(f"Unknown SIGNUP_BACKEND {name!r}")

    # Imported lazily so the memory backend never loads the Firestore or Storage clients
    from signup.infra.firebase import (
        CloudStorageBlobStore,
        FirebaseIdentityProvider,
        FirestoreDocumentStore,
    )

    fb_app = init_firebase(app)
    return Backends(
        name=name,
        identity=FirebaseIdentityProvider(fb_app),
        documents=FirestoreDocumentStore(fb_app),
        blobs=CloudStorageBlobStore(fb_app, bucket_name=app.config.get("FIREBASE_STORAGE_BUCKET")),
        permission=permission,
    )


def init_app(app: Flask) -> None:
    """Build the backend bundle and register it on ``app.extensions``."""
    app.extensions[EXTENSION_KEY] = build_backends(app)


def get_backends() -> Backends:
    """Return the backend bundle of the current application."""
    backends = current_app.extensions.get(EXTENSION_KEY)
    if backends is None:
        raise RuntimeError("Backends are not initialized. Call init_app() first.")
    return backends
