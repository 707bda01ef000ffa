"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request
from werkzeug.exceptions import UnsupportedMediaType

from signup.core.extensions import get_backends
from signup.core.logger import ensure_request_id
from signup.services._shared.base import ServiceContext
from signup.services._shared.ports import Notifier
from signup.services.registration.dto import DEFAULT_IMAGE_CONTENT_TYPE, ImageHandle
from signup.services.registration.service import RegistrationService

F = TypeVar("F", bound=Callable[..., Any])

IMAGE_FIELD = "image"
# Browsers and some HTTP clients send unknown binaries as octet-stream
GENERIC_BINARY = "application/octet-stream"


def build_registration_service(notifier: Notifier, *, channel: str = "api") -> RegistrationService:
    """Wire a :class:`RegistrationService` from the app's backends and config."""

    backends = get_backends()
    config = current_app.config
    return RegistrationService(
        identity=backends.identity,
        documents=backends.documents,
        blobs=backends.blobs,
        notifier=notifier,
        permission=backends.permission,
        users_collection=config.get("USERS_COLLECTION", "users"),
        image_path=config.get("PROFILE_IMAGE_PATH", "images/{user_id}.jpg"),
        password_min_length=int(config.get("PASSWORD_MIN_LENGTH", 6)),
        ctx=ServiceContext(request_id=ensure_request_id(), channel=channel),
    )


def image_from_request(field: str = IMAGE_FIELD) -> ImageHandle | None:
    """Return the uploaded image part as an :class:`ImageHandle`, if one was sent.

    Raises
    ------
    werkzeug.exceptions.UnsupportedMediaType
        When the part is not an image.
    """

    storage = request.files.get(field)
    if storage is None or not storage.filename:
        return None
    mimetype = (storage.mimetype or "").lower()
    if mimetype and mimetype != GENERIC_BINARY and not mimetype.startswith("image/"):
        raise UnsupportedMediaType(f"'{field}' must be an image, got {mimetype!r}")
    content = storage.read()
    if not content:
        return None
    content_type = mimetype if mimetype.startswith("image/") else DEFAULT_IMAGE_CONTENT_TYPE
    return ImageHandle(content=content, filename=storage.filename, content_type=content_type)


def form_payload() -> dict[str, Any]:
    """Return submitted fields from a form body, falling back to JSON."""

    if request.form:
        return request.form.to_dict()
    return request.get_json(silent=True) or {}


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
