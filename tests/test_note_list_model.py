from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path

from PyQt6.QtCore import QModelIndex, Qt

from pynotes.services.note_list_model import NoteListModel, format_timestamp
from pynotes.utils.constants import PLACEHOLDER_NAME


def _populate(notes_dir: Path, write_note) -> None:
    now = time.time()
    write_note(notes_dir / "old.txt", "o", mtime=now - 300)
    write_note(notes_dir / "mid.html", "<p>m</p>", mtime=now - 200)
    write_note(notes_dir / "new.txt", "n", mtime=now - 100)


def test_refresh_mirrors_listing_order(notes: NoteListModel, notes_dir: Path, write_note):
    _populate(notes_dir, write_note)
    listing = notes.refresh()

    assert notes.rowCount() == 3
    assert notes.columnCount() == 2
    assert notes.records == listing
    names = [notes.data(notes.index(r, NoteListModel.COL_NAME)) for r in range(3)]
    assert names == ["new.txt", "mid.html", "old.txt"]


def test_modified_column_uses_locale_short_format(notes: NoteListModel, notes_dir: Path, write_note):
    _populate(notes_dir, write_note)
    notes.refresh()
    record = notes.record_at(0)
    shown = notes.data(notes.index(0, NoteListModel.COL_MODIFIED))
    assert shown == format_timestamp(record.last_modified)
    assert shown


def test_headers_and_roles(notes: NoteListModel, notes_dir: Path, write_note):
    _populate(notes_dir, write_note)
    notes.refresh()
    assert notes.headerData(0, Qt.Orientation.Horizontal) == "Note"
    assert notes.headerData(1, Qt.Orientation.Horizontal) == "Saved at"
    assert notes.headerData(2, Qt.Orientation.Horizontal) is None

    idx = notes.index(0, 0)
    assert notes.data(idx, Qt.ItemDataRole.UserRole) == notes.record_at(0)
    assert notes.data(idx, Qt.ItemDataRole.ToolTipRole) == str(notes_dir / "new.txt")
    assert notes.data(QModelIndex()) is None


def test_record_at_is_guarded(notes: NoteListModel, notes_dir: Path, write_note):
    _populate(notes_dir, write_note)
    notes.refresh()
    assert notes.record_at(0).display_name == "new.txt"
    assert notes.record_at(3) is None
    assert notes.record_at(-1) is None


def test_refresh_replaces_rows_after_disk_change(notes: NoteListModel, notes_dir: Path, write_note):
    _populate(notes_dir, write_note)
    notes.refresh()
    (notes_dir / "new.txt").unlink()
    notes.refresh()
    assert [r.display_name for r in notes.records] == ["mid.html", "old.txt"]
    assert notes.row_of(notes_dir / "old.txt") == 1
    assert notes.row_of(notes_dir / "new.txt") is None


def test_placeholder_goes_on_top_and_is_unique(notes: NoteListModel, notes_dir: Path, write_note):
    _populate(notes_dir, write_note)
    notes.refresh()
    when = datetime(2030, 5, 6, 7, 8)

    first = notes.insert_placeholder(when)
    notes.insert_placeholder(when)

    assert notes.rowCount() == 4
    assert notes.record_at(0) == first
    assert notes.record_at(0).is_placeholder
    assert notes.data(notes.index(0, 0)) == PLACEHOLDER_NAME
    assert notes.data(notes.index(0, 0), Qt.ItemDataRole.ToolTipRole) == PLACEHOLDER_NAME
    assert sum(1 for r in notes.records if r.is_placeholder) == 1


def test_refresh_drops_placeholder(notes: NoteListModel, notes_dir: Path, write_note):
    _populate(notes_dir, write_note)
    notes.insert_placeholder()
    notes.refresh()
    assert not any(r.is_placeholder for r in notes.records)
