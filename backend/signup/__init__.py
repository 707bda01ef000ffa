"""Expose the application factory at package level.

Provide convenient access to :func:`signup.factory.create_app` so callers can
``from signup import create_app`` (``gunicorn "signup:create_app()"``).
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
