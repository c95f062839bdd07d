from __future__ import annotations

import itertools
import os
from typing import Any, Callable

import pytest

from notes_app.errors import StorageWriteError
from notes_app.session import EditorSession


class FakeClock:
    def __init__(self, now: int = 1000):
        self.now = now

    def __call__(self) -> int:
        return self.now


class ManualTimer:
    """Single-slot timer driven by FakeClock.advance()."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.deadline: int | None = None
        self.callback: Callable[[], None] | None = None
        self.armed_count = 0

    @property
    def active(self) -> bool:
        return self.callback is not None

    def arm(self, delay_ms: int, callback: Callable[[], None]) -> None:
        assert self.callback is None, "armed twice without cancel"
        self.deadline = self.clock.now + delay_ms
        self.callback = callback
        self.armed_count += 1

    def cancel(self) -> None:
        self.deadline = None
        self.callback = None

    def advance(self, ms: int) -> None:
        self.clock.now += ms
        if self.callback is not None and self.deadline is not None and self.clock.now >= self.deadline:
            callback = self.callback
            self.cancel()
            callback()


class MemoryStore:
    key = "notes_app_v1"

    def __init__(self, records: list[Any] | None = None):
        self.records: list[Any] = list(records or [])
        self.saves = 0
        self.fail_writes = False

    def load(self) -> list[Any]:
        return [dict(r) if isinstance(r, dict) else r for r in self.records]

    def save(self, records) -> None:
        if self.fail_writes:
            raise StorageWriteError("quota exceeded")
        self.records = [dict(r) for r in records]
        self.saves += 1


class RecordingView:
    def __init__(self, confirm: bool = True):
        self.confirm = confirm
        self.lists: list[tuple[list, str | None]] = []
        self.editors: list = []
        self.prompts: list[str] = []
        self.errors: list[str] = []

    def render_list(self, notes, active_id) -> None:
        self.lists.append((list(notes), active_id))

    def render_editor(self, note) -> None:
        self.editors.append(note)

    def confirm_destructive(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.confirm

    def report_error(self, message: str) -> None:
        self.errors.append(message)


def counter_ids(prefix: str = "n") -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timer(clock) -> ManualTimer:
    return ManualTimer(clock)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def session(store, view, timer, clock) -> EditorSession:
    s = EditorSession(store, view, timer=timer, clock=clock, id_factory=counter_ids())
    s.start()
    return s


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
