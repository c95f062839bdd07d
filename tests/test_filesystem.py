import pytest

from notes_app.storage.filesystem import atomic_write_text, write_recovery_copy


def test_atomic_write_creates_parent_and_leaves_no_temp(tmp_path):
    target = tmp_path / "a" / "b" / "notes.json"
    atomic_write_text(target, "[]")
    atomic_write_text(target, "[1]")
    assert target.read_text(encoding="utf-8") == "[1]"
    assert [p.name for p in target.parent.iterdir()] == ["notes.json"]


def test_atomic_write_failure_raises_oserror(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a dir", encoding="utf-8")
    with pytest.raises(OSError):
        atomic_write_text(blocker / "notes.json", "[]")


def test_write_recovery_copy(tmp_path):
    path = write_recovery_copy(tmp_path, "notes_app_v1", '[{"id": "x"}]')
    assert path.parent == tmp_path
    assert path.name.startswith("notes_app_v1.recovery.")
    assert path.suffix == ".json"
    assert path.read_text(encoding="utf-8") == '[{"id": "x"}]'
