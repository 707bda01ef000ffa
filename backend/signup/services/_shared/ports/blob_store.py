from __future__ import annotations

from typing import Protocol


class BlobStore(Protocol):
    """Port for binary object storage addressed by path."""

    def upload_file(self, path: str, data: bytes, content_type: str) -> None:
        """Store ``data`` at ``path``, replacing any previous object."""
        ...


class InMemoryBlobStore(BlobStore):
    """Dictionary-backed blob store keeping ``(bytes, content_type)`` per path."""

    def __init__(self) -> None:
        self._objects: dict[str, tuple[bytes, str]] = {}

    def upload_file(self, path: str, data: bytes, content_type: str) -> None:
        self._objects[path] = (bytes(data), content_type)

    def get(self, path: str) -> bytes | None:
        entry = self._objects.get(path)
        return entry[0] if entry else None

    def paths(self) -> list[str]:
        return sorted(self._objects)
