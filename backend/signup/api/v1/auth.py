"""Registration endpoint using the service layer."""

from __future__ import annotations

from typing import Any

from flask import Blueprint

from signup.api.deps import (
    build_registration_service,
    form_payload,
    image_from_request,
    json_response,
    timing,
)
from signup.core.errors import APIError, BadGateway, Conflict, UnprocessableEntity
from signup.schemas import NotificationSchema, RegisterFormSchema, RegistrationResultSchema
from signup.services._shared.ports import CollectingNotifier
from signup.services.registration.dto import (
    RegistrationForm,
    RegistrationOutcome,
    RegistrationStep,
)

bp = Blueprint("auth", __name__, url_prefix="/auth")

register_schema = RegisterFormSchema()
result_schema = RegistrationResultSchema()
notification_schema = NotificationSchema(many=True)

_FAILURE_ERRORS: dict[RegistrationStep, type[APIError]] = {
    RegistrationStep.VALIDATION_FAILED: UnprocessableEntity,
    RegistrationStep.EMAIL_IN_USE: Conflict,
    RegistrationStep.EMAIL_CHECK_FAILED: BadGateway,
    RegistrationStep.ACCOUNT_FAILED: BadGateway,
    RegistrationStep.PROFILE_FAILED: BadGateway,
}


def _failure(outcome: RegistrationOutcome, notifier: CollectingNotifier) -> APIError:
    details: dict[str, Any] = {
        "step": outcome.step.value,
        "notifications": notification_schema.dump(notifier.items),
    }
    if outcome.user_id:
        details["user_id"] = outcome.user_id
    error_cls = _FAILURE_ERRORS[outcome.step]
    return error_cls(outcome.message or outcome.step.value, details=details)


@bp.post("/register")
@timing
def register():
    """Register a new user; the optional ``image`` part becomes the profile picture."""

    payload = register_schema.load(form_payload())
    notifier = CollectingNotifier()
    service = build_registration_service(notifier)

    image = service.attach_image(image_from_request())
    form = RegistrationForm.from_raw(**payload, image=image)
    outcome = service.register(form)
    if not outcome.succeeded:
        raise _failure(outcome, notifier)

    data = result_schema.dump(outcome)
    # Include notices raised before submission (e.g. denied storage access)
    data["notifications"] = notification_schema.dump(notifier.items)
    return json_response({"data": data}, status=201)
