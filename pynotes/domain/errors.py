from __future__ import annotations

from pathlib import Path


class NoteError(Exception):
    """Base class for every failure the command layer reports to the user."""


class NoteNotFoundError(NoteError, FileNotFoundError):
    """The note file no longer exists on disk."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Note not found: {path}")
        self.path = path


class NoteFormatError(NoteError, ValueError):
    """Content cannot be read as the format its extension claims."""


class NoteIOError(NoteError, OSError):
    """Write, delete or directory access failed (permissions, locks, disk full)."""


class ImageDecodeError(NoteError, ValueError):
    """The chosen image is missing, corrupt or of an unsupported type."""


class SaveTargetRequired(NoteError):
    """Save was requested for a document that has never been bound to a file."""
