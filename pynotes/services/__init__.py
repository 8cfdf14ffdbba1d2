"""Concrete service implementations: note storage, session state and window settings."""

from .editor_session import EditorSession
from .note_list_model import NoteListModel
from .note_store import NoteStore
from .settings_service import SettingsService

__all__ = ["EditorSession", "NoteListModel", "NoteStore", "SettingsService"]
