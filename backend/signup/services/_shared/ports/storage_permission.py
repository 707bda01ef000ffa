from __future__ import annotations

from typing import Protocol


class StoragePermission(Protocol):
    """Port answering whether reading local storage (picking an image) is allowed."""

    def is_granted(self) -> bool: ...


class StaticStoragePermission(StoragePermission):
    """Permission decided once, from configuration."""

    def __init__(self, granted: bool = True) -> None:
        self.granted = granted

    def is_granted(self) -> bool:
        return self.granted
