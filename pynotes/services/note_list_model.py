from __future__ import annotations

from datetime import datetime
from pathlib import Path

from PyQt6.QtCore import QAbstractTableModel, QDateTime, QLocale, QModelIndex, QObject, Qt

from pynotes.domain.interfaces import INoteStore
from pynotes.domain.models import NoteListing, NoteRecord
from pynotes.utils.constants import PLACEHOLDER_NAME


def format_timestamp(when: datetime) -> str:
    stamp = QDateTime.fromSecsSinceEpoch(int(when.timestamp()))
    return QLocale.system().toString(stamp, QLocale.FormatType.ShortFormat)


class NoteListModel(QAbstractTableModel):
    """Rows of the note grid, always in listing order (newest first).

    There is no incremental diffing: every mutation on disk is followed by a
    full `refresh()`.
    """

    HEADERS = ("Note", "Saved at")
    COL_NAME = 0
    COL_MODIFIED = 1

    def __init__(self, store: INoteStore, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._store = store
        self._records: list[NoteRecord] = []

    @property
    def records(self) -> NoteListing:
        return tuple(self._records)

    # ---------- Qt model API ----------

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._records)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self.HEADERS)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid():
            return None
        record = self.record_at(index.row())
        if record is None:
            return None
        if role == Qt.ItemDataRole.DisplayRole:
            if index.column() == self.COL_NAME:
                return record.display_name
            if index.column() == self.COL_MODIFIED:
                return format_timestamp(record.last_modified)
        elif role == Qt.ItemDataRole.ToolTipRole:
            return str(record.path) if record.path else record.display_name
        elif role == Qt.ItemDataRole.UserRole:
            return record
        return None

    def headerData(
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ):
        if (
            role == Qt.ItemDataRole.DisplayRole
            and orientation == Qt.Orientation.Horizontal
            and 0 <= section < len(self.HEADERS)
        ):
            return self.HEADERS[section]
        return None

    # ---------- Listing ----------

    def refresh(self) -> NoteListing:
        listing = self._store.list_notes()
        self.beginResetModel()
        self._records = list(listing)
        self.endResetModel()
        return listing

    def record_at(self, row: int) -> NoteRecord | None:
        """Map a row back to its record; stale or out-of-range rows give None."""
        if 0 <= row < len(self._records):
            return self._records[row]
        return None

    def row_of(self, path: Path) -> int | None:
        for row, record in enumerate(self._records):
            if record.path == path:
                return row
        return None

    def insert_placeholder(self, when: datetime | None = None) -> NoteRecord:
        """Put the unsaved "New note" row on top; at most one such row exists."""
        record = NoteRecord.placeholder(when or datetime.now(), PLACEHOLDER_NAME)
        if self._records and self._records[0].is_placeholder:
            self.beginRemoveRows(QModelIndex(), 0, 0)
            del self._records[0]
            self.endRemoveRows()
        self.beginInsertRows(QModelIndex(), 0, 0)
        self._records.insert(0, record)
        self.endInsertRows()
        return record
