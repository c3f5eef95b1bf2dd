from __future__ import annotations

from PySide6.QtWidgets import QApplication, QMessageBox

from quicknotes.errors import StorageUnavailable
from quicknotes.logging_setup import install_global_exception_hooks, log, SESSION_ID
from quicknotes.settings import APP_NAME, NOTES_DIR, ORG_NAME
from quicknotes.store.repo import NoteStore
from quicknotes.ui.main_window import NotesWindow


def main() -> int:
    install_global_exception_hooks()
    app = QApplication.instance() or QApplication([])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)

    store = NoteStore(NOTES_DIR)
    try:
        store.ensure()
    except StorageUnavailable as e:
        log.critical("Notes directory unavailable: %s", e)
        QMessageBox.critical(None, "Notes directory unavailable", str(e))
        return 1

    win = NotesWindow(store)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
