from __future__ import annotations


class NotesAppError(Exception):
    """Base class for errors raised by notes_app."""


class StorageWriteError(NotesAppError):
    """The persistent store rejected a write (disk full, permissions, ...)."""

    def __init__(self, message: str, *, target: str | None = None):
        super().__init__(message)
        self.target = target
