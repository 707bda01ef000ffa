"""Service layer public API.

Re-exports
----------
- Base primitives (from ``signup.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Registration service (from ``signup.services.registration``)
    * :class:`RegistrationService`
    * DTOs: :class:`RegistrationForm`, :class:`ImageHandle`,
      :class:`UserProfile`, :class:`RegistrationOutcome`,
      :class:`RegistrationStep`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from .registration.dto import (
    ImageHandle,
    RegistrationForm,
    RegistrationOutcome,
    RegistrationStep,
    UserProfile,
)
from .registration.service import RegistrationService

__all__ = [
    "BaseService",
    "ServiceContext",
    "ImageHandle",
    "RegistrationForm",
    "RegistrationOutcome",
    "RegistrationService",
    "RegistrationStep",
    "UserProfile",
]
