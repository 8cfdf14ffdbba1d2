from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PyQt6.QtGui import QBrush, QColor, QFont, QTextCharFormat, QTextCursor


class CharStyle(Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    PLAIN = "plain"


@dataclass(frozen=True)
class ApplyCharStyle:
    """
    Command: give the selected run exactly one style (none for PLAIN).
    The other three style flags are cleared; family, size and color are kept.
    Returns False, changing nothing, when the selection is empty.
    """

    cursor: QTextCursor
    style: CharStyle

    def execute(self) -> bool:
        if not self.cursor.hasSelection():
            return False
        fmt = QTextCharFormat()
        weight = QFont.Weight.Bold if self.style is CharStyle.BOLD else QFont.Weight.Normal
        fmt.setFontWeight(weight.value)
        fmt.setFontItalic(self.style is CharStyle.ITALIC)
        fmt.setFontUnderline(self.style is CharStyle.UNDERLINE)
        fmt.setFontStrikeOut(self.style is CharStyle.STRIKETHROUGH)
        self.cursor.mergeCharFormat(fmt)
        return True


@dataclass(frozen=True)
class ApplyFontAndColor:
    """Command: replace font (family, size, styles) and text color of the selection."""

    cursor: QTextCursor
    font: QFont
    color: QColor

    def execute(self) -> bool:
        if not self.cursor.hasSelection():
            return False
        fmt = QTextCharFormat()
        fmt.setFont(self.font)
        fmt.setForeground(QBrush(self.color))
        self.cursor.mergeCharFormat(fmt)
        return True


@dataclass(frozen=True)
class ApplyColor:
    """Command: recolor the selected text only."""

    cursor: QTextCursor
    color: QColor

    def execute(self) -> bool:
        if not self.cursor.hasSelection():
            return False
        fmt = QTextCharFormat()
        fmt.setForeground(QBrush(self.color))
        self.cursor.mergeCharFormat(fmt)
        return True
