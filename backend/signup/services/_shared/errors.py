"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask, HTTP, or a vendor SDK directly. Adapters under ``signup.infra``
translate vendor failures into :class:`ProviderError`.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The registration orchestrator converts them into notifications; the API
      layer maps the resulting outcome to a response.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class FormValidationError(ServiceError):
    """
    Raised when a form value fails a local (pre-flight) rule.

    :param field: Offending form field (e.g. ``"email"``).
    :type field: str
    :param message: User-facing explanation.
    :type message: str
    """

    field: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class ProviderError(ServiceError):
    """
    Raised by an adapter when a remote collaborator reports a failure.

    :param message: Human-readable message from the provider, when it has one.
    :type message: str | None
    """

    message: str | None = None

    def describe(self, fallback: str) -> str:
        """
        Return the provider message, or ``fallback`` when it is blank.

        :param fallback: Generic message for the failing step.
        :type fallback: str
        :rtype: str
        """
        text = (self.message or "").strip()
        return text or fallback

    def __str__(self) -> str:
        return self.message or "provider error"
