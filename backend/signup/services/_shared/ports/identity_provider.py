from __future__ import annotations

from typing import Protocol
from uuid import uuid4

from signup.services._shared.errors import ProviderError


class IdentityProvider(Protocol):
    """
    Port for the external identity provider (account registry).

    Implementations raise :class:`ProviderError` when the remote call fails.
    """

    def check_email_in_use(self, email: str) -> bool:
        """Return ``True`` if an account with sign-in methods exists for ``email``."""
        ...

    def create_account(self, email: str, password: str) -> str:
        """Create an email/password account and return its identifier."""
        ...


class InMemoryIdentityProvider(IdentityProvider):
    """Process-local account registry used by tests and the ``memory`` backend."""

    def __init__(self) -> None:
        self._accounts: dict[str, str] = {}
        self._seq = 0

    def check_email_in_use(self, email: str) -> bool:
        return email.lower() in self._accounts

    def create_account(self, email: str, password: str) -> str:
        key = email.lower()
        if key in self._accounts:
            raise ProviderError("The email address is already in use by another account.")
        self._seq += 1
        user_id = f"{uuid4().hex[:20]}{self._seq}"
        self._accounts[key] = user_id
        return user_id

    def user_id_for(self, email: str) -> str | None:
        return self._accounts.get(email.lower())
