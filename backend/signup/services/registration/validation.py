"""Local (pre-flight) validation rules for the registration form."""

from __future__ import annotations

import re
from typing import Final

from signup.services._shared.errors import FormValidationError
from signup.services.registration.dto import RegistrationForm

# Same shape as Android's ``Patterns.EMAIL_ADDRESS``
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

DEFAULT_PASSWORD_MIN_LENGTH: Final[int] = 6

INVALID_EMAIL = "Invalid email address"
EMPTY_PASSWORD = "Password cannot be empty"


def short_password_message(min_length: int) -> str:
    return f"Password must be at least {min_length} characters"


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email or "") is not None


def validate_form(
    form: RegistrationForm, *, password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH
) -> None:
    """
    Apply the form rules in order, stopping at the first failure.

    :param form: Trimmed form values.
    :param password_min_length: Minimum accepted password length.
    :raises FormValidationError: On the first rule that fails.
    """
    if not is_valid_email(form.email):
        raise FormValidationError("email", INVALID_EMAIL)
    if not form.password:
        raise FormValidationError("password", EMPTY_PASSWORD)
    if len(form.password) < password_min_length:
        raise FormValidationError("password", short_password_message(password_min_length))
