"""Application factory for the registration service."""

from __future__ import annotations

import logging

from flask import Flask

from signup import api, cli
from signup.core import cors, errors, extensions, logger, proxy
from signup.core.config import BaseConfig, get_config

log = logging.getLogger(__name__)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
) -> Flask:
    """
    Build the registration app.

    :param config: Config class, import path or object; ``APP_ENV`` decides when
        omitted.
    :param instance_relative_config: Also read ``instance/config.py`` when present
        (local Firebase credentials usually live there).
    :returns: App with the backends bound, ``/api/v1`` routes and the
        ``flask signup`` command group.
    :rtype: Flask
    """
    app = Flask(__name__, instance_relative_config=instance_relative_config)
    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config:
        app.config.from_pyfile("config.py", silent=True)

    # Logging first so backend initialization failures are formatted as JSON
    logger.configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    proxy.init_app(app)
    extensions.init_app(app)
    logger.init_app(app)
    cors.init_app(app)

    api.init_app(app)
    errors.init_app(app)
    cli.init_app(app)

    log.info(
        "signup.app_ready: backend=%s api=%s",
        app.config.get("SIGNUP_BACKEND"),
        app.config.get("API_BASE_PREFIX", "/api"),
    )
    return app
