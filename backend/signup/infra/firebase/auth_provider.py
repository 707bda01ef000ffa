from __future__ import annotations

import logging

import firebase_admin
from firebase_admin import auth

from signup.services._shared.errors import ProviderError
from signup.services._shared.ports import IdentityProvider

from ._errors import AUTH_ERRORS, provider_message

log = logging.getLogger(__name__)

class FirebaseIdentityProvider(IdentityProvider):
    """
    Identity provider backed by Firebase Authentication.

    An email counts as "in use" when Firebase holds a user record for it, which
    is what a non-empty list of sign-in methods means on the client SDKs.
    """

    def __init__(self, app: firebase_admin.App | None = None) -> None:
        self.app = app

    def check_email_in_use(self, email: str) -> bool:
        try:
            auth.get_user_by_email(email, app=self.app)
        except auth.UserNotFoundError:
            return False
        except AUTH_ERRORS as exc:
            log.warning("firebase.auth.lookup_failed: %s", exc)
            raise ProviderError(provider_message(exc)) from exc
        return True

    def create_account(self, email: str, password: str) -> str:
        try:
            record = auth.create_user(email=email, password=password, app=self.app)
        except AUTH_ERRORS as exc:
            log.warning("firebase.auth.create_failed: %s", exc)
            raise ProviderError(provider_message(exc)) from exc
        return record.uid
