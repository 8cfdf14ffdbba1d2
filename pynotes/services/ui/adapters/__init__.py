from __future__ import annotations

from .qt_dialogs import QtFileDialogService, QtFormatDialogService
from .qt_messages import QtMessageService

__all__ = [
    "QtFileDialogService",
    "QtFormatDialogService",
    "QtMessageService",
]
