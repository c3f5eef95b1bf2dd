from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

APP_NAME = "quicknotes"
ORG_NAME = "quicknotes"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

# Relative to the process working directory.
NOTES_DIR = Path("notes")

SUMMARY_MAX_LEN = 50

WINDOW_TITLE = "User Notes App"
WINDOW_SIZE = (500, 500)


@dataclass(frozen=True)
class SettingsKeys:
    UI_GEOMETRY: str = "ui/geometry"
