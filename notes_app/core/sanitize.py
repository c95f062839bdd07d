from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from .models import Note


def _is_number(value: Any) -> bool:
    # JSON true/false load as bool, which is an int subclass;
    # 1e400 loads as inf, which json.dumps would write back as Infinity
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def sanitize_record(raw: Any, *, now: int) -> Note | None:
    """
    Coerce one raw stored record into a Note.
      - no mapping or no string "id" -> None (record dropped)
      - title/content that are not strings -> ""
      - createdAt/updatedAt that are not numbers -> now
    Unknown keys are ignored.
    """
    if not isinstance(raw, Mapping):
        return None
    note_id = raw.get("id")
    if not isinstance(note_id, str):
        return None

    title = raw.get("title")
    content = raw.get("content")
    created_at = raw.get("createdAt")
    updated_at = raw.get("updatedAt")

    return Note(
        id=note_id,
        title=title if isinstance(title, str) else "",
        content=content if isinstance(content, str) else "",
        created_at=created_at if _is_number(created_at) else now,
        updated_at=updated_at if _is_number(updated_at) else now,
    )


def sanitize_records(raw_records: Iterable[Any], *, now: int) -> list[Note]:
    """
    Sanitize a loaded collection, keeping input order.
    Duplicate ids are kept as they are.
    """
    out: list[Note] = []
    for raw in raw_records:
        note = sanitize_record(raw, now=now)
        if note is not None:
            out.append(note)
    return out
