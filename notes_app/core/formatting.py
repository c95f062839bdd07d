from __future__ import annotations

import re
from datetime import datetime

EMPTY_TITLE_TEXT = "(No title)"
EMPTY_LIST_TEXT = "No notes yet"

_WS_RE = re.compile(r"\s+")


def format_datetime(ts_ms: int | float) -> str:
    """Local time as "dd.mm.yyyy, HH:MM:SS"."""
    return datetime.fromtimestamp(ts_ms / 1000).strftime("%d.%m.%Y, %H:%M:%S")


def teaser(content: str, max_len: int = 140) -> str:
    cleaned = _WS_RE.sub(" ", content or "").strip()
    if len(cleaned) <= max_len:
        return cleaned
    return cleaned[: max_len - 1] + "…"


def display_title(title: str) -> str:
    return (title or "").strip() or EMPTY_TITLE_TEXT
