from __future__ import annotations

import logging
from typing import Any

import firebase_admin
from firebase_admin import storage

from signup.services._shared.errors import ProviderError
from signup.services._shared.ports import BlobStore

from ._errors import TRANSPORT_ERRORS, provider_message

log = logging.getLogger(__name__)

class CloudStorageBlobStore(BlobStore):
    """
    Blob store backed by the Firebase default (or a named) Cloud Storage bucket.

    :param app: Firebase app holding credentials and the ``storageBucket`` option.
    :param bucket_name: Explicit bucket; the app's default bucket when ``None``.
    """

    def __init__(
        self,
        app: firebase_admin.App | None = None,
        *,
        bucket_name: str | None = None,
        bucket: Any | None = None,
    ) -> None:
        self.app = app
        self.bucket_name = bucket_name
        self._bucket = bucket

    @property
    def bucket(self) -> Any:
        if self._bucket is None:
            self._bucket = storage.bucket(self.bucket_name, app=self.app)
        return self._bucket

    def upload_file(self, path: str, data: bytes, content_type: str) -> None:
        try:
            self.bucket.blob(path).upload_from_string(data, content_type=content_type)
        except (*TRANSPORT_ERRORS, ValueError) as exc:
            log.warning("storage.upload_failed: %s", path)
            raise ProviderError(provider_message(exc)) from exc
