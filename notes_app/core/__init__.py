from .models import Note, generate_note_id, now_ms
from .sanitize import sanitize_record, sanitize_records
from .formatting import display_title, format_datetime, teaser

__all__ = ["Note",
           "generate_note_id",
           "now_ms",
           "sanitize_record",
           "sanitize_records",
           "display_title",
           "format_datetime",
           "teaser",
           ]
