from __future__ import annotations

import logging
from typing import Sequence

from notes_app.core.models import Note
from notes_app.repository import NoteRepository

log = logging.getLogger(__name__)


class ActiveSelection:
    """The one note (or none) bound to the editor."""

    def __init__(self, repo: NoteRepository):
        self._repo = repo
        self._active_id: str | None = None

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def has_active(self) -> bool:
        return self.current() is not None

    def select(self, note_id: str) -> bool:
        if note_id not in self._repo:
            log.debug("Select ignored, unknown note: id=%s", note_id)
            return False
        self._active_id = note_id
        return True

    def clear(self) -> None:
        self._active_id = None

    def current(self) -> Note | None:
        """Active note, or None when nothing is selected (or it vanished)."""
        return self._repo.get(self._active_id)

    def reconcile_after_deletion(self, sorted_view: Sequence[Note]) -> None:
        self._active_id = sorted_view[0].id if sorted_view else None
