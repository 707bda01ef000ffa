"""Pytest fixtures wiring the Flask app to the in-memory backends.

Every test gets a fresh application so the in-memory account registry,
document store and blob store never leak between cases.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from flask import Flask

from signup.core.config import TestingConfig
from signup.core.extensions import Backends
from signup.factory import create_app


@pytest.fixture()
def app_config() -> type[TestingConfig]:
    """Configuration class used by :func:`app`; override per module if needed."""
    return TestingConfig


@pytest.fixture()
def app(app_config: type[TestingConfig]) -> Generator[Flask, None, None]:
    """Create a Flask application configured for testing."""
    application = create_app(app_config, instance_relative_config=False)
    application.logger.setLevel("WARNING")
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def cli_runner(app: Flask) -> Any:
    """Return a Click runner bound to the app's CLI."""
    return app.test_cli_runner()


@pytest.fixture()
def backends(app: Flask) -> Backends:
    """In-memory collaborators registered on the app."""
    return app.extensions["signup_backends"]


@pytest.fixture()
def calls() -> list[tuple[str, Any]]:
    """Shared, ordered log of remote calls made through the recording doubles."""
    return []
