from __future__ import annotations

from .dialogs import FontApplyCallback, IFileDialogService, IFormatDialogService
from .messages import Answer, IMessageService

__all__ = [
    "IFileDialogService",
    "IFormatDialogService",
    "FontApplyCallback",
    "IMessageService",
    "Answer",
]
