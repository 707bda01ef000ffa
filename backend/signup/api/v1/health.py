"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from signup.api.deps import json_response, timing
from signup.core.extensions import get_backends

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application health and the active backend flavour."""

    backends = get_backends()
    version = current_app.config.get("APP_VERSION", "dev")
    commit = current_app.config.get("APP_COMMIT", "unknown")
    payload = {"status": "ok", "backend": backends.name, "version": version, "commit": commit}
    return json_response(payload)
