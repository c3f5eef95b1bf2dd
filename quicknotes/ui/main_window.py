from __future__ import annotations

from PySide6.QtCore import Qt, QSettings
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QListWidget, QListWidgetItem, QTextEdit, QPushButton, QLabel, QMessageBox,
)

from quicknotes.errors import NoteStoreError
from quicknotes.logging_setup import log
from quicknotes.settings import APP_NAME, ORG_NAME, WINDOW_TITLE
from quicknotes.store.repo import NoteStore
from quicknotes.ui.qt_utils import blocked_signals, select_item_by_data
from quicknotes.ui.ui_state import UiStateStore

FILENAME_ROLE = Qt.ItemDataRole.UserRole


class NotesWindow(QMainWindow):
    """
    Editor, three action buttons and the list of saved notes.

    Every list item carries its note filename; selection is tracked by
    filename so notes with identical summaries stay distinct.
    """

    def __init__(self, store: NoteStore, *, settings: QSettings | None = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.store = store
        self.selected_filename: str | None = None

        self.editor = QTextEdit()
        self.editor.setAcceptRichText(False)
        self.editor.setPlaceholderText("Write your notes here...")
        self.editor.setLineWrapMode(QTextEdit.LineWrapMode.WidgetWidth)
        self.editor.setMinimumHeight(200)

        self.submit_button = QPushButton("Submit")
        self.update_button = QPushButton("Update")
        self.delete_button = QPushButton("Delete")

        self.listw = QListWidget()
        self.listw.setMinimumHeight(150)

        button_bar = QHBoxLayout()
        button_bar.setSpacing(10)
        button_bar.addStretch(1)
        button_bar.addWidget(self.submit_button)
        button_bar.addWidget(self.update_button)
        button_bar.addWidget(self.delete_button)
        button_bar.addStretch(1)

        root = QWidget()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(15, 15, 15, 15)
        root_layout.setSpacing(10)
        root_layout.addWidget(self.editor)
        root_layout.addLayout(button_bar)
        root_layout.addWidget(QLabel("Saved Notes:"))
        root_layout.addWidget(self.listw)
        root.setStyleSheet("font-size: 14px;")
        self.setCentralWidget(root)

        # Signals
        self.submit_button.clicked.connect(self.save_new_note)
        self.update_button.clicked.connect(self.update_selected_note)
        self.delete_button.clicked.connect(self.delete_selected_note)
        self.listw.itemSelectionChanged.connect(self._on_select_note)

        self.ui_state = UiStateStore(owner=self, settings=settings or QSettings(ORG_NAME, APP_NAME))
        self.ui_state.restore()

        self.refresh_list()
        log.info("Window initialized, notes_dir=%s", self.store.notes_dir)

    def closeEvent(self, event):  # type: ignore[override]
        self.ui_state.save()
        super().closeEvent(event)

    def refresh_list(self) -> None:
        """Rebuild the list from a fresh listing and reselect the current note if it still exists."""
        try:
            entries = self.store.list_notes()
        except NoteStoreError as e:
            self._report_error("Loading notes failed", e)
            return

        with blocked_signals(self.listw):
            self.listw.clear()
            for entry in entries:
                item = QListWidgetItem(entry.summary)
                item.setData(FILENAME_ROLE, entry.filename)
                item.setToolTip(entry.filename)
                self.listw.addItem(item)

        if not select_item_by_data(self.listw, FILENAME_ROLE, self.selected_filename):
            self.selected_filename = None

        log.debug("Note list refreshed: count=%d", len(entries))

    def save_new_note(self) -> None:
        text = self.editor.toPlainText()
        try:
            filename = self.store.create(text)
        except NoteStoreError as e:
            self._report_error("Saving note failed", e)
            return
        if filename is None:
            return

        self.selected_filename = None
        self.editor.clear()
        self.refresh_list()

    def update_selected_note(self) -> None:
        if self.selected_filename is None:
            return

        try:
            self.store.update(self.selected_filename, self.editor.toPlainText())
        except NoteStoreError as e:
            self._report_error("Updating note failed", e)
            return
        self.refresh_list()

    def delete_selected_note(self) -> None:
        if self.selected_filename is None:
            return

        filename = self.selected_filename
        if not self.store.delete(filename):
            self.statusBar().showMessage(f"Could not delete {filename}", 5000)
            self.refresh_list()
            return

        self.selected_filename = None
        self.editor.clear()
        self.refresh_list()

    def _on_select_note(self) -> None:
        items = self.listw.selectedItems()
        if not items:
            self.selected_filename = None
            return

        filename = items[0].data(FILENAME_ROLE)
        try:
            text = self.store.read(filename)
        except NoteStoreError as e:
            # editor still holds the previously opened note; keep the selection on it
            select_item_by_data(self.listw, FILENAME_ROLE, self.selected_filename)
            self._report_error("Opening note failed", e)
            return

        self.selected_filename = filename
        self.editor.setPlainText(text)
        log.debug("Note opened: %s", filename)

    def _report_error(self, title: str, exc: NoteStoreError) -> None:
        log.error("%s: %s", title, exc, exc_info=exc)
        QMessageBox.critical(self, title, str(exc))
