"""Convenience exports for application schemas."""

from __future__ import annotations

from .registration import NotificationSchema, RegisterFormSchema, RegistrationResultSchema

__all__ = [
    "NotificationSchema",
    "RegisterFormSchema",
    "RegistrationResultSchema",
]
