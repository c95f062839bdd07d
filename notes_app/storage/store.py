# notes_app/storage/store.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, Sequence

from PySide6.QtCore import QSettings

from notes_app.errors import StorageWriteError
from notes_app.settings import STORAGE_KEY
from notes_app.storage.filesystem import atomic_write_text

log = logging.getLogger(__name__)


class NoteStore(Protocol):
    """
    Whole-collection persistence under one fixed key.

    load() never raises: missing/broken data reads as [].
    save() overwrites the blob or raises StorageWriteError.
    """

    key: str

    def load(self) -> list[Any]: ...

    def save(self, records: Sequence[dict[str, Any]]) -> None: ...


# ───────────────────────── codec ─────────────────────────

def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def parse_blob(raw: str | bytes | None, *, key: str = STORAGE_KEY) -> list[Any]:
    """Decode a stored blob; anything but a JSON array becomes []."""
    if not raw:
        return []
    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        log.warning("Stored notes blob is not valid JSON; starting empty. key=%s", key)
        return []
    if not isinstance(parsed, list):
        log.warning(
            "Stored notes blob is %s, expected array; starting empty. key=%s",
            type(parsed).__name__, key,
        )
        return []
    return parsed


def dump_records(records: Sequence[dict[str, Any]]) -> str:
    """Encode as strict JSON; NaN/Infinity would make the whole blob unreadable."""
    try:
        return json.dumps(list(records), ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        raise StorageWriteError(f"Notes are not JSON-serializable: {e}") from e


# ───────────────────────── implementations ─────────────────────────

class JsonFileStore:
    """Blob kept in <data_dir>/<key>.json, rewritten atomically on save."""

    def __init__(self, data_dir: Path, *, key: str = STORAGE_KEY):
        self.data_dir = Path(data_dir)
        self.key = key

    @property
    def path(self) -> Path:
        return self.data_dir / f"{self.key}.json"

    def load(self) -> list[Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError):
            log.warning("Failed to read notes file: %s", self.path, exc_info=True)
            return []
        return parse_blob(raw, key=self.key)

    def save(self, records: Sequence[dict[str, Any]]) -> None:
        blob = dump_records(records)
        try:
            atomic_write_text(self.path, blob, encoding="utf-8")
        except OSError as e:
            raise StorageWriteError(f"Failed to write {self.path}: {e}", target=str(self.path)) from e
        log.debug("Notes saved: path=%s count=%d bytes=%d", self.path, len(records), len(blob))


class QSettingsStore:
    """Blob kept as a JSON string value in QSettings."""

    def __init__(self, settings: QSettings, *, key: str = STORAGE_KEY):
        self._settings = settings
        self.key = key

    def load(self) -> list[Any]:
        if self._settings.status() != QSettings.Status.NoError:
            log.warning("QSettings unreadable (status=%s); starting empty", self._settings.status())
            return []
        raw = self._settings.value(self.key, None)
        if raw is not None and not isinstance(raw, str):
            log.warning("Stored notes value has type %s; starting empty", type(raw).__name__)
            return []
        return parse_blob(raw, key=self.key)

    def save(self, records: Sequence[dict[str, Any]]) -> None:
        blob = dump_records(records)
        self._settings.setValue(self.key, blob)
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise StorageWriteError(
                f"QSettings rejected write (status={status})",
                target=self._settings.fileName(),
            )
        log.debug("Notes saved to QSettings: key=%s count=%d", self.key, len(records))
