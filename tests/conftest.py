from __future__ import annotations

import os

# Must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pynotes.services.editor_session import EditorSession
from pynotes.services.note_list_model import NoteListModel
from pynotes.services.note_store import NoteStore
from pynotes.services.settings_service import SettingsService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def notes_dir(tmp_path: Path) -> Path:
    d = tmp_path / "Notes"
    d.mkdir()
    return d


@pytest.fixture()
def store(qapp, notes_dir: Path) -> NoteStore:
    return NoteStore(notes_dir)


@pytest.fixture()
def session(qapp, store: NoteStore) -> EditorSession:
    return EditorSession(store)


@pytest.fixture()
def notes(qapp, store: NoteStore) -> NoteListModel:
    return NoteListModel(store)


@pytest.fixture()
def write_note():
    """Write a note file, optionally pinning its mtime (epoch seconds)."""

    def _write(path: Path, text: str, mtime: float | None = None) -> Path:
        path.write_text(text, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write
