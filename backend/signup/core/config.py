"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

BACKEND_FIREBASE: Final[str] = "firebase"
BACKEND_MEMORY: Final[str] = "memory"


# Loads .env in development (no-op when missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, ``default`` when unset."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret used for session signing. Defaults to a development-safe
        placeholder and should be overridden in production.
    SIGNUP_BACKEND: str
        ``"firebase"`` wires the Firebase adapters, ``"memory"`` the in-process
        doubles (useful for local demos and tests).
    FIREBASE_CREDENTIALS: str | None
        Path to a service-account JSON file. Application default credentials
        are used when unset.
    FIREBASE_PROJECT_ID: str | None
        Optional explicit Google Cloud project id.
    FIREBASE_STORAGE_BUCKET: str | None
        Bucket receiving profile images (``<project>.appspot.com``).
    USERS_COLLECTION: str
        Document collection storing user profiles.
    PROFILE_IMAGE_PATH: str
        Blob path template for profile images; ``{user_id}`` is substituted.
    PASSWORD_MIN_LENGTH: int
        Minimum accepted password length.
    STORAGE_ACCESS_GRANTED: bool
        Whether reading device storage (selecting an image) is permitted.
    MAX_CONTENT_LENGTH: int
        Upper bound for request bodies, image included.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Secrets
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    # Backend services
    SIGNUP_BACKEND = os.getenv("SIGNUP_BACKEND", BACKEND_FIREBASE)
    FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS") or os.getenv(
        "GOOGLE_APPLICATION_CREDENTIALS"
    )
    FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")
    FIREBASE_STORAGE_BUCKET = os.getenv("FIREBASE_STORAGE_BUCKET")

    # Registration
    USERS_COLLECTION = os.getenv("USERS_COLLECTION", "users")
    PROFILE_IMAGE_PATH = os.getenv("PROFILE_IMAGE_PATH", "images/{user_id}.jpg")
    PASSWORD_MIN_LENGTH = env_int("PASSWORD_MIN_LENGTH", 6)
    STORAGE_ACCESS_GRANTED = env_bool("STORAGE_ACCESS_GRANTED", True)
    MAX_CONTENT_LENGTH = env_int("MAX_CONTENT_LENGTH", 5 * 1024 * 1024)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses the in-memory backend so no Firebase project is contacted.
    - Propagates exceptions so pytest can surface tracebacks directly.
    """

    TESTING = True
    DEBUG = False
    SIGNUP_BACKEND = BACKEND_MEMORY
    STORAGE_ACCESS_GRANTED = True
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug disabled and always talks to Firebase.
    """

    DEBUG = False
    SIGNUP_BACKEND = BACKEND_FIREBASE
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
