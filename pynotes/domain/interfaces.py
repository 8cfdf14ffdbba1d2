from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from PyQt6.QtGui import QTextDocument

from pynotes.domain.models import NoteFormat, NoteListing


class INoteStore(Protocol):
    """Directory lifecycle and file I/O for notes. Writes should be atomic when possible."""

    @property
    def notes_dir(self) -> Path: ...

    def ensure_directory(self) -> None: ...
    def list_notes(self) -> NoteListing: ...
    def load_content(self, path: Path) -> QTextDocument: ...
    def save_content(
        self, path: Path, document: QTextDocument, fmt: NoteFormat | None = None
    ) -> None: ...
    def delete_note(self, path: Path) -> None: ...
    def normalize_target(self, path: Path) -> Path: ...
    def create_welcome_note(self) -> Path: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_splitter(self) -> bytes | None: ...
    def set_splitter(self, blob: bytes) -> None: ...
    def get_list_header(self) -> bytes | None: ...
    def set_list_header(self, blob: bytes) -> None: ...


class IConfigService(Protocol):
    """Read-only key/value configuration grouped by section."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    """Configuration plus values resolved against the application root."""

    def get_version(self) -> str: ...
    def notes_dir(self) -> Path: ...
    def log_dir(self) -> Path: ...
    def log_level(self) -> str: ...
