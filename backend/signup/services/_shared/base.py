# signup/services/_shared/base.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    :param channel: Surface that started the operation (``"api"``, ``"cli"``).
    """

    request_id: str | None = None
    channel: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the request-scoped :class:`ServiceContext`.
    * Provide a logger that stamps the context on every record.
    * Keep services thin, orchestration-only, no web/SDK leakage.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (tracing, channel).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()
        self.log = logging.getLogger(type(self).__module__)

    def log_extra(self, **fields: Any) -> dict[str, Any]:
        """
        Build the ``extra=`` mapping for a log call.

        :param fields: Structured fields specific to the event.
        :returns: Mapping merged with the context channel.
        :rtype: dict[str, Any]
        """
        extra: dict[str, Any] = {k: v for k, v in fields.items() if v is not None}
        if self.ctx.channel:
            extra.setdefault("endpoint", self.ctx.channel)
        return extra
