from __future__ import annotations

from datetime import datetime

NOTE_PREFIX = "note_"
NOTE_SUFFIX = ".txt"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def note_filename(moment: datetime) -> str:
    """``note_YYYYMMDD_HHMMSS.txt`` for the given moment (second granularity)."""
    return f"{NOTE_PREFIX}{moment.strftime(TIMESTAMP_FORMAT)}{NOTE_SUFFIX}"


def is_note_filename(name: str) -> bool:
    """Any ``.txt`` name counts as a note, not just generated ones."""
    return name.endswith(NOTE_SUFFIX)


def is_plain_filename(name: str | None) -> bool:
    """
    True for a bare file name that stays inside the notes directory:
    no separators, no parent references, not empty.
    """
    if not name or name in (".", ".."):
        return False
    if "/" in name or "\\" in name or "\x00" in name:
        return False
    return True
