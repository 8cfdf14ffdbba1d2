from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import QDateTime, QLocale
from PyQt6.QtGui import QTextCursor


@dataclass(frozen=True)
class InsertDateTime:
    """
    Command: type the given moment at the caret in the locale's short format,
    replacing the selection if there is one. Returns the inserted text.
    """

    cursor: QTextCursor
    when: QDateTime
    locale: QLocale

    def execute(self) -> str:
        text = self.locale.toString(self.when, QLocale.FormatType.ShortFormat)
        self.cursor.insertText(text)
        return text
