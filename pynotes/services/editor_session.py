from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from PyQt6.QtGui import QTextDocument

from pynotes.domain.errors import SaveTargetRequired
from pynotes.domain.interfaces import INoteStore
from pynotes.domain.models import SessionState

log = logging.getLogger(__name__)


class EditorSession:
    """Dirty/saved state machine for the single open document.

    The session owns one QTextDocument for its whole lifetime; the editor widget
    displays that same document, so any edit made in the widget reaches
    `edit()` through `contentsChanged`. Content replaced by the session itself
    (load, clear) does not count as an edit.

    Bound paths are stored resolved so they compare equal to listing records
    however the caller spelled them.

    Every operation either completes or raises before touching state.
    """

    def __init__(self, store: INoteStore, document: QTextDocument | None = None) -> None:
        self._store = store
        self.document = document if document is not None else QTextDocument()
        self.current_path: Path | None = None
        self.has_been_saved = False
        self.is_dirty = False
        self._replacing = False
        self._listeners: list[Callable[[], None]] = []
        self.document.contentsChanged.connect(self._on_contents_changed)

    # ---------- State ----------

    @property
    def state(self) -> SessionState:
        if self.has_been_saved:
            return SessionState.DIRTY_MODIFIED if self.is_dirty else SessionState.CLEAN_SAVED
        return SessionState.DIRTY_UNSAVED if self.is_dirty else SessionState.EMPTY

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Register a callback fired after every user edit."""
        self._listeners.append(callback)

    # ---------- Transitions ----------

    def new_document(self) -> None:
        with self._replacing_content():
            self.document.clear()
            self.document.clearUndoRedoStacks()
        self.current_path = None
        self.has_been_saved = False
        self.is_dirty = False

    def open(self, path: Path) -> None:
        path = path.resolve()
        loaded = self._store.load_content(path)
        with self._replacing_content():
            self.document.setHtml(loaded.toHtml())
            self.document.clearUndoRedoStacks()
        self._bind(path)
        log.debug("Session bound to %s", path)

    def edit(self) -> None:
        self.is_dirty = True
        for callback in list(self._listeners):
            callback()

    def save(self) -> Path:
        if not self.has_been_saved or self.current_path is None:
            raise SaveTargetRequired("Document has no file yet")
        self._store.save_content(self.current_path, self.document)
        self.is_dirty = False
        return self.current_path

    def save_as(self, new_path: Path) -> Path:
        new_path = new_path.resolve()
        self._store.save_content(new_path, self.document)
        self._bind(new_path)
        return new_path

    def delete(self, path: Path) -> bool:
        """Remove `path`; returns True when it was the open document (now cleared)."""
        target = path.resolve()
        self._store.delete_note(path)
        if self.current_path is not None and self.current_path == target:
            self.new_document()
            return True
        return False

    # ---------- Internals ----------

    def _bind(self, path: Path) -> None:
        self.current_path = path
        self.has_been_saved = True
        self.is_dirty = False

    @contextmanager
    def _replacing_content(self) -> Iterator[None]:
        self._replacing = True
        try:
            yield
        finally:
            self._replacing = False

    def _on_contents_changed(self) -> None:
        if not self._replacing:
            self.edit()
