from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from PyQt6.QtCore import QSettings

from pynotes.domain.interfaces import IAppConfig, INoteStore, ISettingsService
from pynotes.services.config import build_app_config
from pynotes.services.editor_session import EditorSession
from pynotes.services.note_list_model import NoteListModel
from pynotes.services.note_store import NoteStore
from pynotes.services.settings_service import SettingsService
from pynotes.services.ui.adapters import QtFileDialogService, QtFormatDialogService, QtMessageService
from pynotes.services.ui.main_window import MainWindow
from pynotes.services.ui.ports import IFileDialogService, IFormatDialogService, IMessageService
from pynotes.services.ui.presenters import CommandDispatcher
from pynotes.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Owns the single EditorSession and NoteListModel of the application
      - Builds the main window with its dispatcher attached
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        store: INoteStore | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        formats: IFormatDialogService | None = None,
        messages: IMessageService | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.store: INoteStore = store or NoteStore(self.config.notes_dir())
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )

        # UI service ports (Qt-backed adapters by default)
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.formats: IFormatDialogService = formats or QtFormatDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.clock = clock

        self.session = EditorSession(self.store)
        self.notes = NoteListModel(self.store)

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IAppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- UI factories ----------

    def build_dispatcher(self, view) -> CommandDispatcher:
        return CommandDispatcher(
            view=view,
            session=self.session,
            notes=self.notes,
            store=self.store,
            messages=self.messages,
            dialogs=self.dialogs,
            formats=self.formats,
            clock=self.clock,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow, attach its dispatcher and load the note list."""
        window = MainWindow(
            session=self.session,
            notes=self.notes,
            settings=self.settings_service,
            app_title=app_title,
        )
        dispatcher = self.build_dispatcher(view=window)
        window.attach_dispatcher(dispatcher)
        dispatcher.start()
        if start_path is not None:
            dispatcher.on_open(start_path)
        return window
