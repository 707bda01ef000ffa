"""Registration-related Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load, pre_load


class RegisterFormSchema(Schema):
    """Input payload of the registration form (form-encoded or multipart).

    Only shape is checked here; the email and password rules belong to the
    registration service so their messages stay identical on every surface.
    """

    class Meta:
        unknown = EXCLUDE

    username = fields.String(load_default="")
    email = fields.String(load_default="")
    password = fields.String(load_default="")
    date_of_birth = fields.String(data_key="dob", load_default="")
    gender = fields.String(load_default="")

    @pre_load
    def _strip(self, data: Any, **_: Any) -> Any:
        if not hasattr(data, "items"):
            return data
        return {k: v.strip() if isinstance(v, str) else v for k, v in data.items()}

    @post_load
    def _defaults(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        return {key: value or "" for key, value in data.items()}


class NotificationSchema(Schema):
    """A single transient message surfaced to the user."""

    message = fields.String()
    level = fields.Function(lambda obj: obj.level.value)


class RegistrationResultSchema(Schema):
    """Response payload for a completed registration."""

    class Meta:
        ordered = True

    user_id = fields.String()
    step = fields.Function(lambda obj: obj.step.value)
    image_uploaded = fields.Boolean(allow_none=True)
    notifications = fields.List(fields.Nested(NotificationSchema))
