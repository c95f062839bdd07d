from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any


def now_ms() -> int:
    """Wall clock in epoch milliseconds."""
    return int(time.time() * 1000)


def generate_note_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    created_at: int | float
    updated_at: int | float

    @classmethod
    def new(cls, note_id: str, *, now: int) -> "Note":
        return cls(id=note_id, title="", content="", created_at=now, updated_at=now)

    def to_record(self) -> dict[str, Any]:
        """Shape stored in the JSON blob (camelCase keys)."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
