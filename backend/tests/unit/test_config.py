"""Unit tests for configuration selection and backend wiring."""

from __future__ import annotations

import pytest
from flask import Flask
from signup.core.config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from signup.core.extensions import build_backends
from signup.services._shared.ports import InMemoryIdentityProvider


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ("testing", TestingConfig),
        ("PRODUCTION", ProductionConfig),
        ("unknown", DevelopmentConfig),
    ],
)
def test_get_config_follows_app_env(monkeypatch, env, expected) -> None:
    monkeypatch.setenv("APP_ENV", env)
    assert get_config() is expected


def test_memory_backend_uses_in_process_doubles() -> None:
    app = Flask(__name__)
    app.config.from_object(TestingConfig)

    backends = build_backends(app)

    assert backends.name == "memory"
    assert isinstance(backends.identity, InMemoryIdentityProvider)
    assert backends.permission.is_granted() is True


def test_unknown_backend_is_rejected() -> None:
    app = Flask(__name__)
    app.config.update(SIGNUP_BACKEND="carrier-pigeon")

    with pytest.raises(RuntimeError):
        build_backends(app)
