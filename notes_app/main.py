"""App entrypoint: notes list + editor with debounced autosave."""

from __future__ import annotations

import argparse
from pathlib import Path

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from notes_app.autosave import QtSingleShotTimer
from notes_app.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from notes_app.session import EditorSession
from notes_app.settings import (
    APP_NAME, AUTOSAVE_DEBOUNCE_MS, DATA_DIR, ORG_NAME, RECOVERY_DIR,
)
from notes_app.storage.store import JsonFileStore, NoteStore, QSettingsStore
from notes_app.ui.main_window import NotesWindow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Simple notes with autosave")
    p.add_argument(
        "--storage",
        choices=("settings", "file"),
        default="settings",
        help="Where notes are kept: Qt settings (default) or a JSON file",
    )
    p.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Folder for the JSON file when --storage=file",
    )
    p.add_argument(
        "--debounce-ms",
        type=int,
        default=AUTOSAVE_DEBOUNCE_MS,
        help="Autosave delay after the last keystroke",
    )
    return p.parse_args(argv)


def build_store(args: argparse.Namespace, settings: QSettings) -> NoteStore:
    if args.storage == "file":
        return JsonFileStore(args.data_dir)
    return QSettingsStore(settings)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log = setup_logging()
    install_global_exception_hooks(log)

    app = QApplication([])
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)
    settings = QSettings(ORG_NAME, APP_NAME)

    win = NotesWindow(settings)
    session = EditorSession(
        build_store(args, settings),
        win,
        timer=QtSingleShotTimer(win),
        delay_ms=args.debounce_ms,
        recovery_dir=RECOVERY_DIR,
    )
    win.bind(session)
    session.start()
    win.show()

    log.info("App started: storage=%s sid=%s", args.storage, SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
