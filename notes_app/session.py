# notes_app/session.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Protocol, Sequence

from notes_app.autosave import AutosaveScheduler, SingleShotTimer
from notes_app.core.models import Note, generate_note_id, now_ms
from notes_app.errors import StorageWriteError
from notes_app.repository import NoteRepository
from notes_app.selection import ActiveSelection
from notes_app.settings import AUTOSAVE_DEBOUNCE_MS
from notes_app.storage.filesystem import write_recovery_copy
from notes_app.storage.store import NoteStore, dump_records

log = logging.getLogger(__name__)

DELETE_PROMPT = "Do you really want to delete this note?"

EDITABLE_FIELDS = ("title", "content")


class NotesView(Protocol):
    def render_list(self, notes: Sequence[Note], active_id: str | None) -> None: ...

    def render_editor(self, note: Note | None) -> None: ...

    def confirm_destructive(self, prompt: str) -> bool: ...

    def report_error(self, message: str) -> None: ...


@dataclass
class _Draft:
    """Editor values not saved yet, tied to the note they were typed into."""
    note_id: str
    title: str
    content: str

    @classmethod
    def of(cls, note: Note | None) -> "_Draft | None":
        if note is None:
            return None
        return cls(note.id, note.title, note.content)


class EditorSession:
    """
    Owns the state of one editing session and wires view intents to it.

    Every on_* handler leaves repository and selection consistent
    before returning to the view.
    """

    def __init__(
        self,
        store: NoteStore,
        view: NotesView,
        *,
        timer: SingleShotTimer,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = generate_note_id,
        delay_ms: int = AUTOSAVE_DEBOUNCE_MS,
        recovery_dir: Path | None = None,
    ):
        self.view = view
        self.recovery_dir = recovery_dir
        self.repo = NoteRepository(
            store,
            clock=clock,
            id_factory=id_factory,
            on_write_error=self._report_write_error,
        )
        self.selection = ActiveSelection(self.repo)
        self.autosave = AutosaveScheduler(
            timer, self._save_draft, clock=clock, delay_ms=delay_ms
        )
        self._store_key = store.key
        self._draft: _Draft | None = None

    # ───────────────────────── state accessors ─────────────────────────

    @property
    def notes(self) -> list[Note]:
        return self.repo.sorted_view()

    @property
    def active_note(self) -> Note | None:
        return self.selection.current()

    @property
    def editor_enabled(self) -> bool:
        return self.selection.has_active

    # ───────────────────────── view intents ─────────────────────────

    def start(self) -> None:
        notes = self.repo.load_all()
        self.selection.reconcile_after_deletion(notes)
        self._reset_draft()
        log.info("Session started: notes=%d active=%s", len(notes), self.selection.active_id)
        self._render()

    def on_create_note(self) -> str:
        self._flush_pending()
        note_id = self.repo.create()
        self.selection.select(note_id)
        self._reset_draft()
        self._render()
        return note_id

    def on_select_note(self, note_id: str) -> None:
        if note_id == self.selection.active_id:
            return
        self._flush_pending()
        if not self.selection.select(note_id):
            return
        self._reset_draft()
        self._render()

    def on_edit_field(self, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"unknown note field: {field!r}")
        if self._draft is None or not self.selection.has_active:
            return
        setattr(self._draft, field, value if value is not None else "")
        self.autosave.notify_edit()

    def on_explicit_save(self) -> None:
        if not self.selection.has_active:
            return
        self.autosave.flush_now()

    def on_delete_note(self) -> bool:
        note = self.selection.current()
        if note is None:
            return False
        self._flush_pending()
        if not self.view.confirm_destructive(DELETE_PROMPT):
            log.debug("Delete cancelled by user: id=%s", note.id)
            return False
        self.repo.delete(note.id)
        self.selection.reconcile_after_deletion(self.repo.sorted_view())
        self._reset_draft()
        self._render()
        return True

    def close(self) -> None:
        """Persist edits still waiting for the autosave timer."""
        self._flush_pending()
        log.info("Session closed")

    # ───────────────────────── internals ─────────────────────────

    def _flush_pending(self) -> None:
        if self.autosave.is_pending:
            log.debug("Flushing pending autosave: id=%s", self.selection.active_id)
            self.autosave.flush_now()

    def _save_draft(self) -> None:
        draft = self._draft
        if draft is None:
            return
        if draft.note_id != self.selection.active_id:
            log.info("Autosave skipped: note switched before timer fired (id=%s)", draft.note_id)
            return
        if not self.repo.update(draft.note_id, draft.title, draft.content):
            return
        self._render()

    def _reset_draft(self) -> None:
        self._draft = _Draft.of(self.selection.current())

    def _render(self) -> None:
        self.view.render_list(self.repo.sorted_view(), self.selection.active_id)
        self.view.render_editor(self.selection.current())

    def _report_write_error(self, error: StorageWriteError) -> None:
        message = f"Could not save notes: {error}"
        if self.recovery_dir is not None:
            try:
                rec_path = write_recovery_copy(
                    self.recovery_dir, self._store_key, dump_records(self.repo.records())
                )
            except (OSError, StorageWriteError):
                log.exception("Failed to write recovery copy")
            else:
                log.critical("Recovery copy written: %s", rec_path)
                message += f"\n\nA recovery copy was written to:\n{rec_path}"
        self.view.report_error(message)
