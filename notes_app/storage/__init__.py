from .filesystem import atomic_write_text, write_recovery_copy
from .store import JsonFileStore, NoteStore, QSettingsStore, dump_records, parse_blob

__all__ = ["atomic_write_text",
           "write_recovery_copy",
           "JsonFileStore",
           "NoteStore",
           "QSettingsStore",
           "dump_records",
           "parse_blob",
           ]
