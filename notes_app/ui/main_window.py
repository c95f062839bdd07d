# notes_app/ui/main_window.py

from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import QSettings, Qt, QTimer
from PySide6.QtGui import QAction, QBrush, QColor, QKeySequence
from PySide6.QtWidgets import (
    QHBoxLayout, QLineEdit, QListWidget, QListWidgetItem, QMainWindow,
    QMessageBox, QPlainTextEdit, QPushButton, QSplitter, QVBoxLayout, QWidget,
)

from notes_app.core.formatting import EMPTY_LIST_TEXT, display_title, format_datetime, teaser
from notes_app.core.models import Note
from notes_app.session import EditorSession
from notes_app.settings import APP_NAME
from notes_app.ui.qt_utils import blocked_signals
from notes_app.ui.ui_state import UiStateStore

log = logging.getLogger(__name__)

ACTIVE_ROW_COLOR = QColor(241, 239, 239)
TITLE_PLACEHOLDER = "Enter a title..."
CONTENT_PLACEHOLDER = "Start writing your note"


class NotesWindow(QMainWindow):
    """
    Qt implementation of NotesView.

    render_* are plain projections of session state; user input goes
    back through the bound EditorSession.
    """

    def __init__(self, settings: QSettings):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.session: EditorSession | None = None
        self._error_dialog_open = False

        self.create_btn = QPushButton("New note")
        self.listw = QListWidget()
        self.listw.setWordWrap(True)

        self.title_input = QLineEdit()
        self.content_input = QPlainTextEdit()
        self.save_btn = QPushButton("Save")
        self.delete_btn = QPushButton("Delete")

        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(8, 8, 8, 8)
        left_layout.addWidget(self.create_btn)
        left_layout.addWidget(self.listw)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.save_btn)
        buttons.addWidget(self.delete_btn)

        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(8, 8, 8, 8)
        right_layout.addWidget(self.title_input)
        right_layout.addWidget(self.content_input, 1)
        right_layout.addLayout(buttons)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(left)
        self.splitter.addWidget(right)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)
        self.setCentralWidget(self.splitter)

        self._ui_state = UiStateStore(owner=self, settings=settings, splitter=self.splitter)
        self._ui_state.restore()
        self.splitter.splitterMoved.connect(lambda *_: self._ui_state.schedule_save())

        self._build_menu()

        # Signals
        self.create_btn.clicked.connect(self._on_create_clicked)
        self.save_btn.clicked.connect(lambda: self._session().on_explicit_save())
        self.delete_btn.clicked.connect(lambda: self._session().on_delete_note())
        self.listw.itemClicked.connect(self._on_item_clicked)
        self.title_input.textEdited.connect(
            lambda text: self._session().on_edit_field("title", text)
        )
        self.content_input.textChanged.connect(
            lambda: self._session().on_edit_field("content", self.content_input.toPlainText())
        )

    def bind(self, session: EditorSession) -> None:
        self.session = session

    def _session(self) -> EditorSession:
        if self.session is None:
            raise RuntimeError("NotesWindow used before bind()")
        return self.session

    def _build_menu(self) -> None:
        filem = self.menuBar().addMenu("File")

        act_new = QAction("New note", self)
        act_new.setShortcut(QKeySequence.New)
        act_new.triggered.connect(self._on_create_clicked)

        # QKeySequence.Save maps to Cmd+S on macOS and Ctrl+S elsewhere
        act_save = QAction("Save", self)
        act_save.setShortcut(QKeySequence.Save)
        act_save.triggered.connect(lambda: self._session().on_explicit_save())

        act_delete = QAction("Delete note", self)
        act_delete.setShortcut(QKeySequence("Ctrl+Shift+Backspace"))
        act_delete.triggered.connect(lambda: self._session().on_delete_note())

        act_quit = QAction("Quit", self)
        act_quit.setShortcut(QKeySequence.Quit)
        act_quit.triggered.connect(self.close)

        filem.addAction(act_new)
        filem.addAction(act_save)
        filem.addAction(act_delete)
        filem.addSeparator()
        filem.addAction(act_quit)

    # ───────────────────────── NotesView ─────────────────────────

    def render_list(self, notes: Sequence[Note], active_id: str | None) -> None:
        with blocked_signals(self.listw):
            self.listw.clear()
            if not notes:
                empty = QListWidgetItem(EMPTY_LIST_TEXT)
                empty.setFlags(Qt.NoItemFlags)
                self.listw.addItem(empty)
                return

            for note in notes:
                lines = [display_title(note.title)]
                short = teaser(note.content)
                if short:
                    lines.append(short)
                lines.append(format_datetime(note.updated_at))

                item = QListWidgetItem("\n".join(lines))
                item.setData(Qt.UserRole, note.id)
                if note.id == active_id:
                    item.setBackground(QBrush(ACTIVE_ROW_COLOR))
                    font = item.font()
                    font.setBold(True)
                    item.setFont(font)
                self.listw.addItem(item)
                if note.id == active_id:
                    self.listw.setCurrentItem(item)

    def render_editor(self, note: Note | None) -> None:
        enabled = note is not None
        for w in (self.title_input, self.content_input, self.save_btn, self.delete_btn):
            w.setEnabled(enabled)

        with blocked_signals(self.title_input, self.content_input):
            if note is None:
                self.title_input.clear()
                self.content_input.clear()
                self.title_input.setPlaceholderText(TITLE_PLACEHOLDER)
                self.content_input.setPlaceholderText(CONTENT_PLACEHOLDER)
                return
            # untouched widgets keep cursor/scroll position
            if self.title_input.text() != note.title:
                self.title_input.setText(note.title)
            if self.content_input.toPlainText() != note.content:
                self.content_input.setPlainText(note.content)

    def confirm_destructive(self, prompt: str) -> bool:
        answer = QMessageBox.question(
            self, "Delete note", prompt,
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No,
        )
        return answer == QMessageBox.Yes

    def report_error(self, message: str) -> None:
        log.warning("Reported to user: %s", message)
        self.statusBar().showMessage("Save failed", 10_000)
        # critical() spins a nested loop; later failures only reach the log and status bar
        if self._error_dialog_open:
            return
        self._error_dialog_open = True
        try:
            QMessageBox.critical(self, "Save error", message)
        finally:
            self._error_dialog_open = False

    # ───────────────────────── Qt events ─────────────────────────

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        note_id = item.data(Qt.UserRole)
        if note_id:
            # re-rendering clears the list, so not from inside its own click signal
            QTimer.singleShot(0, lambda: self._session().on_select_note(note_id))

    def _on_create_clicked(self) -> None:
        self._session().on_create_note()
        self.title_input.setFocus()

    def resizeEvent(self, event):  # type: ignore[override]
        super().resizeEvent(event)
        self._ui_state.schedule_save()

    def moveEvent(self, event):  # type: ignore[override]
        super().moveEvent(event)
        self._ui_state.schedule_save()

    def closeEvent(self, event):  # type: ignore[override]
        """Persist edits still waiting for the autosave timer."""
        if self.session is not None:
            self.session.close()
        self._ui_state.save()
        super().closeEvent(event)
