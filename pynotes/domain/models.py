from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from pathlib import Path

from pynotes.domain.errors import NoteFormatError


class NoteFormat(Enum):
    """The two on-disk note formats, keyed by file extension.

    Rich notes are Qt HTML. `.rtf` files are not recognized, so RTF notes left
    by older note apps in the same directory are not listed.
    """

    PLAIN = ".txt"
    RICH = ".html"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def is_recognized(cls, path: Path) -> bool:
        return path.suffix.lower() in {f.value for f in cls}

    @classmethod
    def for_path(cls, path: Path) -> NoteFormat:
        suffix = path.suffix.lower()
        for fmt in cls:
            if fmt.value == suffix:
                return fmt
        raise NoteFormatError(f"Unsupported note extension {path.suffix!r}: {path.name}")


@dataclass(frozen=True)
class NoteRecord:
    """Read-only snapshot of one note file, taken during a directory scan.

    Attributes:
        path: Absolute file path; None only for the unsaved "New note" row.
        display_name: File name shown in the list.
        last_modified: Modification time read from the filesystem.
    """

    path: Path | None
    display_name: str
    last_modified: datetime

    @property
    def is_placeholder(self) -> bool:
        return self.path is None

    @classmethod
    def from_path(cls, path: Path) -> NoteRecord:
        stat = path.stat()
        return cls(
            path=path,
            display_name=path.name,
            last_modified=datetime.fromtimestamp(stat.st_mtime),
        )

    @classmethod
    def placeholder(cls, when: datetime, name: str) -> NoteRecord:
        return cls(path=None, display_name=name, last_modified=when)


# Ordered newest-modified first.
NoteListing = tuple[NoteRecord, ...]


class SessionState(Enum):
    EMPTY = auto()
    DIRTY_UNSAVED = auto()
    CLEAN_SAVED = auto()
    DIRTY_MODIFIED = auto()
