"""HTTP surface of the registration service, mounted under ``API_BASE_PREFIX``."""

from __future__ import annotations

from flask import Flask


def init_app(app: Flask) -> None:
    """Mount every v1 blueprint at ``<API_BASE_PREFIX>/v1<relative prefix>``."""
    from signup.api.v1 import API_VERSION, REGISTRY

    base = "{}/{}".format(app.config.get("API_BASE_PREFIX", "/api").rstrip("/"), API_VERSION)
    for blueprint, prefix in REGISTRY:
        app.register_blueprint(blueprint, url_prefix=base + prefix)


__all__ = ["init_app"]
