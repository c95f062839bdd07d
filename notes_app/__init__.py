from .core.models import Note, generate_note_id, now_ms
from .errors import NotesAppError, StorageWriteError
from .repository import NoteRepository
from .selection import ActiveSelection
from .autosave import AutosaveScheduler, AutosaveState
from .session import EditorSession, NotesView

__all__ = ["Note",
           "generate_note_id",
           "now_ms",
           "NotesAppError",
           "StorageWriteError",
           "NoteRepository",
           "ActiveSelection",
           "AutosaveScheduler",
           "AutosaveState",
           "EditorSession",
           "NotesView",
           ]
