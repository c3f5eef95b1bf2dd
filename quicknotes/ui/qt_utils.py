from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtWidgets import QListWidget, QListWidgetItem


@contextmanager
def blocked_signals(obj):
    """Silence Qt signals on ``obj`` for the duration of the block."""
    previous = obj.blockSignals(True)
    try:
        yield obj
    finally:
        obj.blockSignals(previous)


def find_item_by_data(listw: QListWidget, role, value) -> QListWidgetItem | None:
    for row in range(listw.count()):
        item = listw.item(row)
        if item.data(role) == value:
            return item
    return None


def select_item_by_data(listw: QListWidget, role, value) -> bool:
    """
    Make the item whose ``role`` data equals ``value`` current, without
    emitting selection signals. Clears the selection when nothing matches.
    """
    item = find_item_by_data(listw, role, value) if value is not None else None
    with blocked_signals(listw):
        if item is None:
            listw.clearSelection()
            listw.setCurrentRow(-1)
            return False
        listw.setCurrentItem(item)
    return True
