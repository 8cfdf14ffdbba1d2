"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    ImageDecodeError,
    NoteError,
    NoteFormatError,
    NoteIOError,
    NoteNotFoundError,
    SaveTargetRequired,
)
from .interfaces import IAppConfig, IConfigService, INoteStore, ISettingsService
from .models import NoteFormat, NoteListing, NoteRecord, SessionState

__all__ = [
    "INoteStore",
    "ISettingsService",
    "IConfigService",
    "IAppConfig",
    "NoteFormat",
    "NoteListing",
    "NoteRecord",
    "SessionState",
    "NoteError",
    "NoteNotFoundError",
    "NoteFormatError",
    "NoteIOError",
    "ImageDecodeError",
    "SaveTargetRequired",
]
