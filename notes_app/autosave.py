# notes_app/autosave.py

from __future__ import annotations

import enum
import logging
from typing import Callable, Protocol

from PySide6.QtCore import QObject, QTimer

from notes_app.core.models import now_ms
from notes_app.settings import AUTOSAVE_DEBOUNCE_MS

log = logging.getLogger(__name__)


class SingleShotTimer(Protocol):
    """One slot: arm() replaces whatever was armed before."""

    def arm(self, delay_ms: int, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class QtSingleShotTimer:
    """SingleShotTimer on top of a single-shot QTimer (needs a running Qt event loop)."""

    def __init__(self, parent: QObject | None = None):
        self._callback: Callable[[], None] | None = None
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)

    def arm(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.setInterval(int(delay_ms))
        self._timer.start()

    def cancel(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
        self._callback = None

    def _fire(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


class AutosaveState(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"


class AutosaveScheduler:
    """
    Debounce for edit events: a burst of notify_edit() calls ends in one save,
    delay_ms after the last call.

    IDLE --notify_edit--> PENDING(deadline) --timeout/flush_now--> IDLE
    """

    def __init__(
        self,
        timer: SingleShotTimer,
        save_callback: Callable[[], None],
        *,
        clock: Callable[[], int] = now_ms,
        delay_ms: int = AUTOSAVE_DEBOUNCE_MS,
    ):
        self._timer = timer
        self._save = save_callback
        self._clock = clock
        self.delay_ms = int(delay_ms)
        self._state = AutosaveState.IDLE
        self._deadline: int | None = None

    @property
    def state(self) -> AutosaveState:
        return self._state

    @property
    def deadline(self) -> int | None:
        return self._deadline

    @property
    def is_pending(self) -> bool:
        return self._state is AutosaveState.PENDING

    def notify_edit(self) -> None:
        self._timer.cancel()
        self._deadline = self._clock() + self.delay_ms
        self._timer.arm(self.delay_ms, self._on_timeout)
        self._state = AutosaveState.PENDING

    def flush_now(self) -> None:
        self._timer.cancel()
        self._to_idle()
        self._save()

    def _on_timeout(self) -> None:
        if self._state is not AutosaveState.PENDING:
            # cancelled after the timer already queued its callback
            return
        log.debug("Autosave timer fired: deadline=%s", self._deadline)
        self._to_idle()
        self._save()

    def _to_idle(self) -> None:
        self._state = AutosaveState.IDLE
        self._deadline = None
