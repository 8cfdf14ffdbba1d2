from __future__ import annotations

import logging

from PyQt6.QtCore import QByteArray, QEvent, QModelIndex, QObject, QPoint, Qt
from PyQt6.QtGui import QAction, QKeySequence, QTextCursor
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QMainWindow,
    QMenu,
    QSplitter,
    QStatusBar,
    QTableView,
    QTextEdit,
)

from pynotes.domain.interfaces import ISettingsService
from pynotes.services.editor_session import EditorSession
from pynotes.services.note_list_model import NoteListModel
from pynotes.utils.constants import APP_NAME

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Thin PyQt window: note grid on the left, rich editor on the right.

    Every action is forwarded as a command name to the attached dispatcher;
    the window itself only implements the small view surface the dispatcher
    talks back through.
    """

    def __init__(
        self,
        session: EditorSession,
        notes: NoteListModel,
        settings: ISettingsService,
        *,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1000, 650)

        self.session = session
        self.notes = notes
        self.settings = settings
        self._dispatcher = None

        # Widgets
        self.table = QTableView(self)
        self.table.setModel(self.notes)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(
            NoteListModel.COL_NAME, QHeaderView.ResizeMode.Stretch
        )
        self.table.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)

        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(True)
        self.editor.setDocument(self.session.document)
        self.editor.installEventFilter(self)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.table)
        self.splitter.addWidget(self.editor)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 2)
        self.setCentralWidget(self.splitter)

        # Signals
        self.table.doubleClicked.connect(self._on_row_activated)
        self.table.customContextMenuRequested.connect(self._show_list_menu)

        # UI
        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        if geo:
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if split:
            self.splitter.restoreState(QByteArray(split))
        header = self.settings.get_list_header()
        if header:
            self.table.horizontalHeader().restoreState(QByteArray(header))

    def attach_dispatcher(self, dispatcher) -> None:
        self._dispatcher = dispatcher

    # ---------- UI creation ----------

    def _command(
        self,
        text: str,
        name: str,
        shortcut: str | None = None,
    ) -> QAction:
        act = QAction(text, self)
        if shortcut is not None:
            act.setShortcut(QKeySequence(shortcut))
        act.triggered.connect(lambda _checked=False, n=name: self._dispatch(n))
        return act

    def _build_actions(self) -> None:
        # File
        self.act_new = self._command("&New", "new", "Ctrl+N")
        self.act_open = self._command("&Open…", "open", "Ctrl+O")
        self.act_save = self._command("&Save", "save", "Ctrl+S")
        self.act_save_as = self._command("Save &As…", "save_as", "Ctrl+Shift+S")
        self.act_exit = self._command("E&xit", "exit", "Ctrl+Q")

        # Edit
        self.act_undo = self._command("&Undo", "undo", "Ctrl+Z")
        self.act_redo = self._command("&Redo", "redo", "Ctrl+R")
        self.act_select_all = self._command("Select &All", "select_all", "Ctrl+A")

        # Format
        self.act_bold = self._command("&Bold", "bold", "Ctrl+B")
        self.act_italic = self._command("&Italic", "italic", "Ctrl+I")
        self.act_underline = self._command("&Underline", "underline", "Ctrl+U")
        self.act_strike = self._command("&Strikethrough", "strikethrough")
        self.act_plain = self._command("&Plain", "plain")
        self.act_font = self._command("&Font…", "font")
        self.act_color = self._command("Text &Color…", "color")

        # Insert
        self.act_datetime = self._command("&Date/Time", "insert_datetime")
        self.act_image = self._command("&Image…", "insert_image")

        # Note list
        self.act_delete = self._command("&Delete", "delete")

        self.act_undo.setEnabled(False)
        self.act_redo.setEnabled(False)

    def _build_menu(self) -> None:
        m = self.menuBar()
        filem = m.addMenu("&File")
        for a in (self.act_new, self.act_open, self.act_save, self.act_save_as):
            filem.addAction(a)
        filem.addSeparator()
        filem.addAction(self.act_exit)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_undo)
        editm.addAction(self.act_redo)
        editm.addSeparator()
        editm.addAction(self.act_select_all)

        formatm = m.addMenu("F&ormat")
        for a in (
            self.act_bold,
            self.act_italic,
            self.act_underline,
            self.act_strike,
            self.act_plain,
        ):
            formatm.addAction(a)
        formatm.addSeparator()
        formatm.addAction(self.act_font)
        formatm.addAction(self.act_color)

        insertm = m.addMenu("&Insert")
        insertm.addAction(self.act_datetime)
        insertm.addAction(self.act_image)

        self.list_menu = QMenu(self)
        self.list_menu.addAction(self.act_delete)

    # ---------- INotesView ----------

    def text_cursor(self) -> QTextCursor:
        return self.editor.textCursor()

    def set_text_cursor(self, cursor: QTextCursor) -> None:
        self.editor.setTextCursor(cursor)

    def selected_row(self) -> int | None:
        index = self.table.currentIndex()
        return index.row() if index.isValid() else None

    def select_row(self, row: int) -> None:
        self.table.setCurrentIndex(self.notes.index(row, NoteListModel.COL_NAME))

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_undo_enabled(self, enabled: bool) -> None:
        self.act_undo.setEnabled(enabled)

    def set_redo_enabled(self, enabled: bool) -> None:
        self.act_redo.setEnabled(enabled)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Internals ----------

    # QTextEdit handles these keys itself and would bypass the dispatcher.
    _EDITOR_KEYS = (
        (QKeySequence.StandardKey.Undo, "undo"),
        (QKeySequence.StandardKey.Redo, "redo"),
        (QKeySequence.StandardKey.SelectAll, "select_all"),
    )

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self.editor and event.type() == QEvent.Type.KeyPress:
            for key, name in self._EDITOR_KEYS:
                if event.matches(key):
                    self._dispatch(name)
                    return True
        return super().eventFilter(obj, event)

    def _dispatch(self, name: str) -> None:
        if self._dispatcher is None:
            log.warning("No dispatcher attached; ignoring %s", name)
            return
        self._dispatcher.dispatch(name)

    def _on_row_activated(self, index: QModelIndex) -> None:
        if self._dispatcher is not None and index.isValid():
            self._dispatcher.on_open_record(index.row())

    def _show_list_menu(self, pos: QPoint) -> None:
        index = self.table.indexAt(pos)
        if not index.isValid():
            return
        self.table.setCurrentIndex(index)
        self.list_menu.exec(self.table.viewport().mapToGlobal(pos))

    # ---------- Close ----------

    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        self.settings.set_list_header(bytes(self.table.horizontalHeader().saveState()))
        super().closeEvent(event)
