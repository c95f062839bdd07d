# notes_app/storage/filesystem.py

from __future__ import annotations

import contextlib
import os
import uuid
from datetime import datetime
from pathlib import Path


# ───────────────────────── public API ─────────────────────────

def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    A reader sees either the old blob or the new one, never half of it.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            with contextlib.suppress(OSError):
                tmp_path.unlink()


def write_recovery_copy(recovery_dir: Path, stem: str, text: str) -> Path:
    """
    Emergency dump when the normal save fails.

    Writes a timestamped copy into recovery_dir:
      <stem>.recovery.<YYYYmmdd-HHMMSS>.json
    """
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    recovery_path = Path(recovery_dir) / f"{stem or 'notes'}.recovery.{ts}.json"
    atomic_write_text(recovery_path, text, encoding="utf-8")
    return recovery_path
