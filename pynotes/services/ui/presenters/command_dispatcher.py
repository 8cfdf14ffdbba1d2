from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Protocol, runtime_checkable

from PyQt6.QtCore import QDateTime, QLocale, Qt
from PyQt6.QtGui import QColor, QFont, QTextCursor

from pynotes.domain.errors import NoteError
from pynotes.domain.interfaces import INoteStore
from pynotes.domain.models import NoteRecord
from pynotes.services.editor_session import EditorSession
from pynotes.services.note_list_model import NoteListModel
from pynotes.services.ui.commands import (
    ApplyCharStyle,
    ApplyColor,
    ApplyFontAndColor,
    CharStyle,
    InsertDateTime,
    InsertImage,
)
from pynotes.services.ui.ports.dialogs import IFileDialogService, IFormatDialogService
from pynotes.services.ui.ports.messages import Answer, IMessageService
from pynotes.utils.constants import APP_NAME, IMAGE_FILE_FILTER, NOTE_FILE_FILTER

log = logging.getLogger(__name__)


@runtime_checkable
class INotesView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor
    def text_cursor(self) -> QTextCursor: ...
    def set_text_cursor(self, cursor: QTextCursor) -> None: ...

    # note list
    def selected_row(self) -> int | None: ...
    def select_row(self, row: int) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def set_undo_enabled(self, enabled: bool) -> None: ...
    def set_redo_enabled(self, enabled: bool) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...
    def close(self) -> bool: ...


def window_title(path: Path | None) -> str:
    return f"{path.name} — {APP_NAME}" if path else APP_NAME


class CommandDispatcher:
    """
    Maps named user commands to operations on the editor session and the note list.

    The Qt window turns every menu item, shortcut and list gesture into
    `dispatch(name)`; everything the user sees in return goes through the view,
    message and dialog ports. All NoteError failures stop here: they are logged
    and shown in a modal error box, never raised to the event loop.
    """

    def __init__(
        self,
        *,
        view: INotesView,
        session: EditorSession,
        notes: NoteListModel,
        store: INoteStore,
        messages: IMessageService,
        dialogs: IFileDialogService,
        formats: IFormatDialogService,
        clock: Callable[[], datetime] = datetime.now,
        locale: QLocale | None = None,
    ) -> None:
        self.view = view
        self.session = session
        self.notes = notes
        self.store = store
        self.messages = messages
        self.dialogs = dialogs
        self.formats = formats
        self._clock = clock
        self._locale = locale or QLocale.system()

        self.commands: dict[str, Callable[[], object]] = {
            "new": self.on_new,
            "open": self.on_open,
            "save": self.on_save,
            "save_as": self.on_save_as,
            "exit": self.on_exit,
            "undo": self.on_undo,
            "redo": self.on_redo,
            "select_all": self.on_select_all,
            "bold": partial(self.on_style, CharStyle.BOLD),
            "italic": partial(self.on_style, CharStyle.ITALIC),
            "underline": partial(self.on_style, CharStyle.UNDERLINE),
            "strikethrough": partial(self.on_style, CharStyle.STRIKETHROUGH),
            "plain": partial(self.on_style, CharStyle.PLAIN),
            "font": self.on_font,
            "color": self.on_color,
            "insert_datetime": self.on_insert_datetime,
            "insert_image": self.on_insert_image,
            "delete": self.on_delete,
        }

        self.session.subscribe(self._on_edited)

    # ---------- Dispatch ----------

    def dispatch(self, name: str) -> object:
        try:
            handler = self.commands[name]
        except KeyError:
            raise KeyError(f"Unknown command: {name}") from None
        log.debug("Command %s", name)
        return handler()

    def start(self) -> None:
        """Prepare the notes directory; a first run on an empty one gets the welcome note."""
        try:
            self.store.ensure_directory()
            if not self.notes.refresh():
                path = self.store.create_welcome_note()
                log.info("First run: created %s", path)
                self.notes.refresh()
        except NoteError as e:
            self._report("Notes", f"Cannot prepare the notes directory:\n{e}", e)
        self.view.set_title(window_title(None))
        self._set_history(undo=False, redo=False)

    # ---------- File commands ----------

    def on_new(self) -> bool:
        if self.session.is_dirty:
            answer = self.messages.ask_yes_no_cancel(
                self.view, "Save changes", "Do you want to save the changes?"
            )
            if answer is Answer.CANCEL:
                return False
            if answer is Answer.YES and not self.on_save():
                return False
        self._clear_screen()
        self._set_history(undo=False, redo=False)
        return True

    def on_open(self, path: Path | None = None) -> bool:
        # Unlike on_new, unsaved edits are replaced without asking.
        if path is None:
            path = self.dialogs.get_open_file(
                self.view, "Open", str(self.store.notes_dir), NOTE_FILE_FILTER
            )
            if path is None:
                return False
        try:
            self.session.open(path)
        except NoteError as e:
            self._report("Open Error", f"Failed to open note:\n{e}", e)
            return False
        self._after_bind(self.session.current_path, "Opened")
        self._set_history(undo=False, redo=False)
        return True

    def on_open_record(self, row: int) -> bool:
        record = self.notes.record_at(row)
        if record is None or record.path is None:
            return False
        return self.on_open(record.path)

    def on_save(self) -> bool:
        if not self.session.has_been_saved:
            return self.on_save_as()
        try:
            path = self.session.save()
        except NoteError as e:
            self._report("Save Error", f"Failed to save note:\n{e}", e)
            return False
        self._after_bind(path, "Saved")
        return True

    def on_save_as(self, path: Path | None = None) -> bool:
        if path is None:
            start = self.session.current_path or self.store.notes_dir
            path = self.dialogs.get_save_file(self.view, "Save As", str(start), NOTE_FILE_FILTER)
            if path is None:
                return False
        target = self.store.normalize_target(path)
        try:
            saved = self.session.save_as(target)
        except NoteError as e:
            self._report("Save Error", f"Failed to save note:\n{e}", e)
            return False
        self._after_bind(saved, "Saved")
        return True

    def on_delete(self, record: NoteRecord | None = None) -> bool:
        if record is None:
            row = self.view.selected_row()
            record = self.notes.record_at(row) if row is not None else None
        if record is None or record.path is None:
            return False

        if not self.messages.ask(
            self.view,
            "Confirm deletion",
            f"Are you sure you want to delete the note '{record.display_name}'?",
        ):
            return False
        try:
            was_open = self.session.delete(record.path)
        except NoteError as e:
            self._report("Delete Error", f"Failed to delete note:\n{e}", e)
            return False

        self._refresh_listing()
        if was_open:
            self._clear_screen()
        self.view.show_status(f"Deleted: {record.display_name}")
        return True

    def on_exit(self) -> None:
        self.view.close()

    # ---------- Edit commands ----------

    def on_undo(self) -> None:
        cursor = self.view.text_cursor()
        self.session.document.undo(cursor)
        self.view.set_text_cursor(cursor)
        self._set_history(undo=False, redo=True)

    def on_redo(self) -> None:
        cursor = self.view.text_cursor()
        self.session.document.redo(cursor)
        self.view.set_text_cursor(cursor)
        self._set_history(undo=True, redo=False)

    def on_select_all(self) -> None:
        cursor = self.view.text_cursor()
        cursor.select(QTextCursor.SelectionType.Document)
        self.view.set_text_cursor(cursor)

    # ---------- Format commands ----------

    def on_style(self, style: CharStyle) -> bool:
        return ApplyCharStyle(self.view.text_cursor(), style).execute()

    def on_font(self) -> bool:
        cursor = self.view.text_cursor()
        fmt = cursor.charFormat()

        def apply(font: QFont, color: QColor) -> None:
            ApplyFontAndColor(cursor, font, color).execute()

        chosen = self.formats.get_font_and_color(
            self.view, fmt.font(), self._current_color(cursor), on_apply=apply
        )
        if chosen is None:
            return False
        return ApplyFontAndColor(cursor, *chosen).execute()

    def on_color(self) -> bool:
        cursor = self.view.text_cursor()
        color = self.formats.get_color(self.view, self._current_color(cursor))
        if color is None:
            return False
        return ApplyColor(cursor, color).execute()

    # ---------- Insert commands ----------

    def on_insert_datetime(self) -> str:
        cursor = self.view.text_cursor()
        when = QDateTime.fromMSecsSinceEpoch(int(self._clock().timestamp() * 1000))
        text = InsertDateTime(cursor, when, self._locale).execute()
        self.view.set_text_cursor(cursor)
        return text

    def on_insert_image(self, path: Path | None = None) -> bool:
        if path is None:
            path = self.dialogs.get_open_file(self.view, "Choose an image", None, IMAGE_FILE_FILTER)
            if path is None:
                return False
        cursor = self.view.text_cursor()
        try:
            InsertImage(cursor, path).execute()
        except NoteError as e:
            self._report("Image Error", f"Failed to insert image:\n{e}", e)
            return False
        self.view.set_text_cursor(cursor)
        return True

    # ---------- Helpers ----------

    def _after_bind(self, path: Path, verb: str) -> None:
        self._refresh_listing()
        self.view.set_title(window_title(path))
        row = self.notes.row_of(path)
        if row is not None:
            self.view.select_row(row)
        self.view.show_status(f"{verb}: {path}")

    def _clear_screen(self) -> None:
        self.session.new_document()
        self.view.set_title(window_title(None))
        self.notes.insert_placeholder(self._clock())
        self.view.select_row(0)

    def _refresh_listing(self) -> None:
        try:
            self.notes.refresh()
        except NoteError as e:
            self._report("Notes", f"Cannot list notes:\n{e}", e)

    def _set_history(self, *, undo: bool, redo: bool) -> None:
        self.view.set_undo_enabled(undo)
        self.view.set_redo_enabled(redo)

    def _on_edited(self) -> None:
        self.view.set_undo_enabled(True)

    def _current_color(self, cursor: QTextCursor) -> QColor:
        brush = cursor.charFormat().foreground()
        if brush.style() == Qt.BrushStyle.NoBrush:
            return QColor("black")
        return brush.color()

    def _report(self, title: str, text: str, exc: Exception) -> None:
        log.warning("%s: %s", title, exc)
        self.messages.error(self.view, title, text)
