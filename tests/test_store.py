import sys
import os
from datetime import datetime, timedelta

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quicknotes.errors import ReadError, StorageUnavailable, WriteError
from quicknotes.store.repo import NoteEntry, NoteStore


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def tick(self, seconds: int = 1) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture()
def clock():
    return FakeClock(datetime(2024, 1, 2, 3, 4, 5))


@pytest.fixture()
def store(tmp_path, clock):
    s = NoteStore(tmp_path / "notes", clock=clock)
    s.ensure()
    return s


def test_ensure_creates_directory(tmp_path):
    s = NoteStore(tmp_path / "a" / "notes")
    s.ensure()
    assert s.notes_dir.is_dir()
    s.ensure()  # already present


def test_ensure_fails_when_path_is_a_file(tmp_path):
    blocker = tmp_path / "notes"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(StorageUnavailable):
        NoteStore(blocker).ensure()


def test_list_empty(store):
    assert store.list_notes() == []


def test_list_missing_directory(tmp_path):
    with pytest.raises(StorageUnavailable):
        NoteStore(tmp_path / "missing").list_notes()


def test_create_then_read_roundtrip(store):
    text = "Hello world\nSecond line\nThird line"
    filename = store.create(text)

    assert filename == "note_20240102_030405.txt"
    entries = store.list_notes()
    assert entries == [NoteEntry(summary="Hello world Second line", filename=filename)]
    assert store.read(entries[0].filename) == text


def test_create_writes_verbatim(store):
    text = "line one\r\nline two\n\n  trailing  \n"
    filename = store.create(text)
    raw = (store.notes_dir / filename).read_bytes()
    assert raw == text.encode("utf-8")


def test_create_blank_is_noop(store):
    assert store.create("") is None
    assert store.create("   ") is None
    assert store.create("\n\t \n") is None
    assert store.list_notes() == []
    assert list(store.notes_dir.iterdir()) == []


def test_create_same_second_overwrites(store):
    first = store.create("first")
    second = store.create("second")

    assert first == second
    assert len(store.list_notes()) == 1
    assert store.read(first) == "second"


def test_create_distinct_seconds(store, clock):
    a = store.create("first")
    clock.tick()
    b = store.create("second")

    assert a != b
    assert {e.filename for e in store.list_notes()} == {a, b}


def test_list_ignores_non_txt(store):
    (store.notes_dir / "readme.md").write_text("# nope", encoding="utf-8")
    (store.notes_dir / "dir.txt").mkdir()
    (store.notes_dir / "manual.txt").write_text("by hand", encoding="utf-8")

    assert store.list_notes() == [NoteEntry(summary="by hand", filename="manual.txt")]


def test_list_skips_unreadable_file(store):
    (store.notes_dir / "bad.txt").write_bytes(b"\xff\xfe\xfa not utf-8")
    good = store.create("good note")

    entries = store.list_notes()
    assert [e.filename for e in entries] == [good]


def test_duplicate_summaries_stay_distinct(store, clock):
    a = store.create("same\nsummary\nbody one")
    clock.tick()
    b = store.create("same\nsummary\nbody two")

    entries = store.list_notes()
    assert [e.summary for e in entries] == ["same summary", "same summary"]
    by_name = {e.filename: store.read(e.filename) for e in entries}
    assert by_name == {a: "same\nsummary\nbody one", b: "same\nsummary\nbody two"}


def test_read_missing(store):
    with pytest.raises(ReadError):
        store.read("note_19990101_000000.txt")


def test_read_rejects_path_outside_store(store, tmp_path):
    (tmp_path / "secret.txt").write_text("secret", encoding="utf-8")
    with pytest.raises(ReadError):
        store.read("../secret.txt")


def test_update_changes_only_target(store, clock):
    a = store.create("alpha")
    clock.tick()
    b = store.create("beta")

    store.update(a, "alpha v2\nmore")

    assert store.read(a) == "alpha v2\nmore"
    assert store.read(b) == "beta"
    entries = store.list_notes()
    assert len(entries) == 2
    assert {e.summary for e in entries} == {"alpha v2 more", "beta"}


def test_update_with_empty_content(store):
    a = store.create("alpha")
    store.update(a, "")
    assert store.read(a) == ""
    assert store.list_notes() == [NoteEntry(summary="", filename=a)]


def test_update_invalid_name(store):
    with pytest.raises(WriteError):
        store.update("../escape.txt", "x")


def test_update_fails_when_directory_gone(tmp_path):
    s = NoteStore(tmp_path / "never-created")
    with pytest.raises(WriteError):
        s.update("note_20240102_030405.txt", "x")


def test_delete(store):
    a = store.create("alpha")

    assert store.delete(a) is True
    assert store.list_notes() == []
    assert not (store.notes_dir / a).exists()


def test_delete_twice_reports_failure(store):
    a = store.create("alpha")
    assert store.delete(a) is True
    assert store.delete(a) is False
    assert a not in [e.filename for e in store.list_notes()]


def test_delete_invalid_name(store):
    assert store.delete("../x.txt") is False
    assert store.delete("") is False


def test_no_temp_files_left_behind(store, clock):
    a = store.create("alpha")
    store.update(a, "alpha 2")
    assert [p.name for p in store.notes_dir.iterdir()] == [a]


def test_summarize_exposed_on_store(store):
    assert store.summarize("OnlyOneLine") == "OnlyOneLine"
    assert NoteStore.summarize("a\nb\nc") == "a b"
