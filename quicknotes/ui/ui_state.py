import logging

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QWidget

from quicknotes.settings import APP_NAME, SettingsKeys, WINDOW_SIZE


log = logging.getLogger(f"{APP_NAME}.ui_state")


class UiStateStore:
    """
    Saves and restores window geometry through QSettings.
    """
    def __init__(self, *, owner: QWidget, settings: QSettings):
        self._owner = owner
        self._settings = settings

    def restore(self) -> None:
        try:
            geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
            if geo and self._owner.restoreGeometry(geo):
                return
        except Exception:
            log.exception("Failed to restore UI state from QSettings")
        self._owner.resize(*WINDOW_SIZE)

    def save(self) -> None:
        try:
            self._settings.setValue(SettingsKeys.UI_GEOMETRY, self._owner.saveGeometry())
            self._settings.sync()
        except Exception:
            log.exception("Failed to save UI state to QSettings")
