from __future__ import annotations

from pathlib import Path


class NoteStoreError(Exception):
    """Base class for note storage failures."""

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class StorageUnavailable(NoteStoreError):
    """The notes directory cannot be created or accessed."""


class ReadError(NoteStoreError):
    """A note file cannot be read."""


class WriteError(NoteStoreError):
    """A note file cannot be created or overwritten."""
