# notes_app/repository.py

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Iterator

from notes_app.core.models import Note, generate_note_id, now_ms
from notes_app.core.sanitize import sanitize_records
from notes_app.errors import StorageWriteError
from notes_app.storage.store import NoteStore

log = logging.getLogger(__name__)


class NoteRepository:
    """
    In-memory note collection mirrored into a NoteStore.

    Every mutation rewrites the whole blob. If the store rejects the write,
    the in-memory change is kept and the error goes to on_write_error
    (or is raised when no handler is set).
    """

    def __init__(
        self,
        store: NoteStore,
        *,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = generate_note_id,
        on_write_error: Callable[[StorageWriteError], None] | None = None,
    ):
        self._store = store
        self._clock = clock
        self._id_factory = id_factory
        self._on_write_error = on_write_error
        self._notes: list[Note] = []

    @property
    def clock(self) -> Callable[[], int]:
        return self._clock

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    def __contains__(self, note_id: object) -> bool:
        return self._index_of(note_id) is not None

    # ───────────────────────── public API ─────────────────────────

    def load_all(self) -> list[Note]:
        raw = self._store.load()
        self._notes = sanitize_records(raw, now=self._clock())
        dropped = len(raw) - len(self._notes)
        if dropped:
            log.warning("Dropped %d malformed note record(s) on load", dropped)
        log.info("Notes loaded: count=%d key=%s", len(self._notes), self._store.key)
        return self.sorted_view()

    def get(self, note_id: str | None) -> Note | None:
        idx = self._index_of(note_id)
        return None if idx is None else self._notes[idx]

    def create(self) -> str:
        note = Note.new(self._new_id(), now=self._clock())
        self._notes.insert(0, note)
        log.info("Note created: id=%s", note.id)
        self._persist()
        return note.id

    def update(self, note_id: str, title: str, content: str) -> bool:
        idx = self._index_of(note_id)
        if idx is None:
            log.debug("Update ignored, unknown note: id=%s", note_id)
            return False
        self._notes[idx] = dataclasses.replace(
            self._notes[idx],
            title=title,
            content=content,
            updated_at=self._clock(),
        )
        self._persist()
        return True

    def delete(self, note_id: str) -> bool | None:
        """
        Remove a note and rewrite the blob.
        Returns None when the id is unknown, else whether the collection is now empty.
        """
        idx = self._index_of(note_id)
        if idx is None:
            log.debug("Delete ignored, unknown note: id=%s", note_id)
            return None
        del self._notes[idx]
        log.info("Note deleted: id=%s remaining=%d", note_id, len(self._notes))
        self._persist()
        return not self._notes

    def sorted_view(self) -> list[Note]:
        """Notes by updated_at, newest first. Sorts the backing list in place."""
        self._notes.sort(key=lambda n: n.updated_at, reverse=True)
        return list(self._notes)

    def records(self) -> list[dict]:
        return [n.to_record() for n in self._notes]

    # ───────────────────────── internals ─────────────────────────

    def _index_of(self, note_id: object) -> int | None:
        if note_id is None:
            return None
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None

    def _new_id(self) -> str:
        # ids must stay unique even if the factory repeats itself
        note_id = self._id_factory()
        while note_id in self:
            log.warning("Generated note id already in use, retrying: id=%s", note_id)
            note_id = self._id_factory()
        return note_id

    def _persist(self) -> bool:
        try:
            self._store.save(self.records())
        except StorageWriteError as e:
            log.error("Persisting notes failed: %s", e)
            if self._on_write_error is None:
                raise
            self._on_write_error(e)
            return False
        return True
