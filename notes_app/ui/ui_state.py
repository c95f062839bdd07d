from __future__ import annotations

import logging

from PySide6.QtCore import QSettings, QTimer
from PySide6.QtWidgets import QMainWindow, QSplitter

from notes_app.settings import UI_STATE_DEBOUNCE_MS, SettingsKeys

log = logging.getLogger(__name__)


class UiStateStore:
    """Saves/restores window geometry and splitter sizes in QSettings (debounced)."""

    def __init__(
        self,
        *,
        owner: QMainWindow,
        settings: QSettings,
        splitter: QSplitter,
        debounce_ms: int = UI_STATE_DEBOUNCE_MS,
    ):
        self._owner = owner
        self._settings = settings
        self._splitter = splitter
        self._restoring = False
        self._timer = QTimer(owner)
        self._timer.setSingleShot(True)
        self._timer.setInterval(int(debounce_ms))
        self._timer.timeout.connect(self.save)

    def schedule_save(self) -> None:
        if self._restoring:
            return
        self._timer.start()

    @staticmethod
    def _coerce_sizes(value) -> list[int] | None:
        if value is None:
            return None
        if isinstance(value, str):
            value = value.replace(",", " ").split()
        if not isinstance(value, (list, tuple)):
            return None
        out: list[int] = []
        for x in value:
            try:
                out.append(int(x))
            except (TypeError, ValueError):
                continue
        return out or None

    def restore(self) -> None:
        self._restoring = True
        try:
            geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
            if geo:
                self._owner.restoreGeometry(geo)
            else:
                self._owner.resize(1000, 650)

            st = self._settings.value(SettingsKeys.UI_STATE)
            if st:
                self._owner.restoreState(st)

            sizes = self._coerce_sizes(self._settings.value(SettingsKeys.UI_SPLITTER))
            if sizes:
                self._splitter.setSizes(sizes)
        finally:
            self._restoring = False

    def save(self) -> None:
        self._timer.stop()
        self._settings.setValue(SettingsKeys.UI_GEOMETRY, self._owner.saveGeometry())
        self._settings.setValue(SettingsKeys.UI_STATE, self._owner.saveState())
        self._settings.setValue(SettingsKeys.UI_SPLITTER, self._splitter.sizes())
        log.debug("UI state saved")
