from notes_app.core.models import Note
from notes_app.core.sanitize import sanitize_record, sanitize_records


def test_drops_records_without_string_id():
    raw = [{"id": "x"}, {"foo": 1}, {"id": "y", "title": "T", "updatedAt": 5}]
    notes = sanitize_records(raw, now=42)
    assert [n.id for n in notes] == ["x", "y"]


def test_defaults_missing_fields():
    note = sanitize_record({"id": "x"}, now=42)
    assert note == Note(id="x", title="", content="", created_at=42, updated_at=42)


def test_keeps_valid_fields_and_ignores_extras():
    raw = {"id": "y", "title": "T", "content": "body", "createdAt": 1, "updatedAt": 5, "pinned": True}
    assert sanitize_record(raw, now=42) == Note("y", "T", "body", 1, 5)


def test_wrong_types_fall_back_to_defaults():
    raw = {"id": "z", "title": 7, "content": None, "createdAt": "1", "updatedAt": True}
    note = sanitize_record(raw, now=99)
    assert (note.title, note.content, note.created_at, note.updated_at) == ("", "", 99, 99)


def test_non_mapping_and_numeric_ids_dropped():
    raw = ["x", None, 3, {"id": 5}, {"id": "ok"}]
    assert [n.id for n in sanitize_records(raw, now=1)] == ["ok"]


def test_float_timestamps_are_kept():
    assert sanitize_record({"id": "f", "updatedAt": 12.5}, now=1).updated_at == 12.5


def test_duplicate_ids_are_preserved():
    raw = [{"id": "d", "title": "a"}, {"id": "d", "title": "b"}]
    assert [n.title for n in sanitize_records(raw, now=1)] == ["a", "b"]


def test_non_finite_timestamps_fall_back_to_now():
    raw = {"id": "big", "createdAt": float("inf"), "updatedAt": float("nan")}
    note = sanitize_record(raw, now=77)
    assert (note.created_at, note.updated_at) == (77, 77)


def test_huge_integer_timestamp_is_kept():
    assert sanitize_record({"id": "h", "updatedAt": 10**400}, now=1).updated_at == 10**400
