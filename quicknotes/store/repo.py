from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from quicknotes.core.filenames import is_note_filename, is_plain_filename, note_filename
from quicknotes.core.summary import summarize
from quicknotes.errors import ReadError, StorageUnavailable, WriteError
from quicknotes.logging_setup import log
from quicknotes.store.filesystem import atomic_write_text


@dataclass(frozen=True)
class NoteEntry:
    summary: str
    filename: str


@dataclass(frozen=True)
class NoteStore:
    """
    Flat directory of plain-text notes, one ``.txt`` file per note.

    Notes are addressed by filename only. Summaries are display text and
    are recomputed on every ``list_notes()`` call.
    """

    notes_dir: Path
    clock: Callable[[], datetime] = datetime.now

    summarize = staticmethod(summarize)

    def ensure(self) -> None:
        try:
            self.notes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(
                f"Cannot create notes directory {self.notes_dir}: {e}", path=self.notes_dir
            ) from e

    def note_path(self, filename: str) -> Path:
        return self.notes_dir / filename

    def list_notes(self) -> list[NoteEntry]:
        """
        One entry per ``.txt`` file, in directory enumeration order.

        Unreadable files are logged and skipped.
        """
        try:
            paths = [p for p in self.notes_dir.iterdir() if is_note_filename(p.name) and p.is_file()]
        except OSError as e:
            raise StorageUnavailable(
                f"Cannot list notes directory {self.notes_dir}: {e}", path=self.notes_dir
            ) from e

        entries: list[NoteEntry] = []
        for path in paths:
            try:
                content = self._read_path(path)
            except ReadError as e:
                log.warning("Skipping unreadable note %s: %s", path.name, e)
                continue
            entries.append(NoteEntry(summary=summarize(content), filename=path.name))
        return entries

    def create(self, content: str) -> str | None:
        """Write a new note; returns its filename, or None for blank content."""
        if not content or not content.strip():
            log.debug("Create skipped: blank content")
            return None

        filename = note_filename(self.clock())
        path = self.note_path(filename)
        if path.exists():
            # second-granularity names: a create within the same second replaces the earlier note
            log.warning("Filename collision, overwriting %s", filename)

        self._write_path(path, content)
        log.info("Note created: %s (%d chars)", filename, len(content))
        return filename

    def read(self, filename: str) -> str:
        if not is_plain_filename(filename):
            raise ReadError(f"Invalid note filename: {filename!r}")
        return self._read_path(self.note_path(filename))

    def update(self, filename: str, content: str) -> None:
        if not is_plain_filename(filename):
            raise WriteError(f"Invalid note filename: {filename!r}")
        path = self.note_path(filename)
        self._write_path(path, content)
        log.info("Note updated: %s (%d chars)", filename, len(content))

    def delete(self, filename: str) -> bool:
        """Remove a note. Returns False (never raises) when nothing was removed."""
        if not is_plain_filename(filename):
            log.warning("Delete refused, invalid note filename: %r", filename)
            return False

        path = self.note_path(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            log.warning("Delete failed, note already absent: %s", filename)
            return False
        except OSError as e:
            log.warning("Delete failed for %s: %s", filename, e)
            return False

        log.info("Note deleted: %s", filename)
        return True

    def _read_path(self, path: Path) -> str:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Cannot read note {path.name}: {e}", path=path) from e

    def _write_path(self, path: Path, content: str) -> None:
        try:
            atomic_write_text(path, content, encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Cannot write note {path.name}: {e}", path=path) from e
