"""
DTOs for RegistrationService.

Contracts for the self-registration flow: the submitted form, the optional
image handle picked beforehand, the profile document written once the account
exists, and the terminal outcome reported back to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from signup.services._shared.ports import Notification

DEFAULT_IMAGE_CONTENT_TYPE = "image/jpeg"

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ImageHandle:
    """
    Opaque handle to image bytes selected locally before submitting.

    :param content: Raw image bytes.
    :type content: bytes
    :param filename: Original file name, informational only.
    :type filename: str | None
    :param content_type: MIME type sent along with the upload.
    :type content_type: str
    """

    content: bytes
    filename: str | None = None
    content_type: str = DEFAULT_IMAGE_CONTENT_TYPE

    def __repr__(self) -> str:
        return f"ImageHandle(filename={self.filename!r}, size={len(self.content)})"


@dataclass(frozen=True, slots=True)
class RegistrationForm:
    """
    Values submitted by the user for one registration attempt.

    :param username: Display name.
    :type username: str
    :param email: Sign-in email.
    :type email: str
    :param password: Raw password, forwarded to the identity provider only.
    :type password: str
    :param date_of_birth: Free-form date of birth as typed.
    :type date_of_birth: str
    :param gender: Selected gender option.
    :type gender: str
    :param image: Image picked beforehand, if any.
    :type image: ImageHandle | None
    """

    username: str
    email: str
    password: str = field(repr=False)
    date_of_birth: str = ""
    gender: str = ""
    image: ImageHandle | None = None

    @classmethod
    def from_raw(
        cls,
        *,
        username: str = "",
        email: str = "",
        password: str = "",
        date_of_birth: str = "",
        gender: str = "",
        image: ImageHandle | None = None,
    ) -> RegistrationForm:
        """Build a form trimming surrounding whitespace from every text field."""
        return cls(
            username=(username or "").strip(),
            email=(email or "").strip(),
            password=(password or "").strip(),
            date_of_birth=(date_of_birth or "").strip(),
            gender=(gender or "").strip(),
            image=image,
        )


# --------------------------------------------------------------------------- #
# Persisted shape
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserProfile:
    """
    Profile document keyed by the identity provider's user id.

    :param user_id: Identifier assigned on account creation.
    :type user_id: str
    """

    user_id: str
    username: str
    email: str
    date_of_birth: str
    gender: str

    @classmethod
    def from_form(cls, user_id: str, form: RegistrationForm) -> UserProfile:
        return cls(
            user_id=user_id,
            username=form.username,
            email=form.email,
            date_of_birth=form.date_of_birth,
            gender=form.gender,
        )

    def to_document(self) -> dict[str, Any]:
        """Fields stored in the ``users`` collection (the id is the document key)."""
        return {
            "username": self.username,
            "email": self.email,
            "dob": self.date_of_birth,
            "gender": self.gender,
        }


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


class RegistrationStep(str, Enum):
    """Terminal step reached by a registration attempt."""

    VALIDATION_FAILED = "validation_failed"
    EMAIL_IN_USE = "email_in_use"
    EMAIL_CHECK_FAILED = "email_check_failed"
    ACCOUNT_FAILED = "account_failed"
    PROFILE_FAILED = "profile_failed"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class RegistrationOutcome:
    """
    Output summary for one registration attempt.

    :param step: Where the sequence stopped.
    :type step: RegistrationStep
    :param user_id: Account id when the account was created.
    :type user_id: str | None
    :param image_uploaded: ``None`` when no upload was attempted.
    :type image_uploaded: bool | None
    :param notifications: Messages surfaced to the user, in order.
    :type notifications: tuple[Notification, ...]
    """

    step: RegistrationStep
    user_id: str | None = None
    image_uploaded: bool | None = None
    notifications: tuple[Notification, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.step is RegistrationStep.COMPLETED

    @property
    def message(self) -> str | None:
        """Headline message: the profile notice on success, the failure notice otherwise."""
        if not self.notifications:
            return None
        if self.step is RegistrationStep.COMPLETED:
            return self.notifications[0].message
        return self.notifications[-1].message
