from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class NotificationLevel(str, Enum):
    """Severity of a user-facing notification."""

    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notification:
    """
    One transient, user-visible message.

    :ivar message: Text shown to the user.
    :ivar level: Severity marker.
    """

    message: str
    level: NotificationLevel = NotificationLevel.INFO


class Notifier(Protocol):
    """Port that surfaces a transient message to the user."""

    def notify(self, notification: Notification) -> None: ...


class CollectingNotifier(Notifier):
    """Notifier that keeps every message in order (HTTP responses, tests)."""

    def __init__(self) -> None:
        self.items: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.items.append(notification)

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.items]
