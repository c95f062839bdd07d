from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

APP_NAME = "notes-app"
ORG_NAME = "notes-app"

# Single storage entry holding the whole collection as a JSON array.
STORAGE_KEY = "notes_app_v1"

AUTOSAVE_DEBOUNCE_MS = 350
UI_STATE_DEBOUNCE_MS = 400

APP_HOME = Path.home() / f".{APP_NAME}"
LOG_DIR = APP_HOME / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
DATA_DIR = APP_HOME / "data"
RECOVERY_DIR = APP_HOME / "recovery"


@dataclass(frozen=True)
class SettingsKeys:
    UI_GEOMETRY: str = "ui/geometry"
    UI_STATE: str = "ui/windowState"
    UI_SPLITTER: str = "ui/splitter_sizes"
