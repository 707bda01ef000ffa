"""Vendor exception families the Firebase adapters turn into ``ProviderError``."""

from __future__ import annotations

import requests
from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

# Firestore and Cloud Storage calls go through google-cloud clients. Besides
# API errors they surface credential refresh failures and raw transport errors
# (``requests`` for Storage, builtin ``ConnectionError`` from lower layers).
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    GoogleAPIError,
    GoogleAuthError,
    requests.RequestException,
    ConnectionError,
)

# Firebase Auth wraps HTTP failures in ``FirebaseError`` and rejects bad
# arguments with ``ValueError`` before any call is made.
AUTH_ERRORS: tuple[type[BaseException], ...] = (
    FirebaseError,
    ValueError,
    GoogleAuthError,
    requests.RequestException,
    ConnectionError,
)


def provider_message(exc: BaseException) -> str | None:
    """Best human-readable text carried by a vendor exception, if any."""
    return getattr(exc, "message", None) or str(exc) or None
