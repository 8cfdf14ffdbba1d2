from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QColorDialog, QDialog, QFileDialog

from pynotes.services.ui.font_color_dialog import FontColorDialog
from pynotes.services.ui.ports.dialogs import (
    FontApplyCallback,
    IFileDialogService,
    IFormatDialogService,
)


class QtFileDialogService(IFileDialogService):
    """Qt-backed implementation of file dialogs."""

    def get_open_file(
        self,
        parent: Any | None,
        caption: str,
        start_dir: str | None,
        filter_str: str,
    ) -> Path | None:
        path_str, _ = QFileDialog.getOpenFileName(parent, caption, start_dir or "", filter_str)
        return Path(path_str) if path_str else None

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        start_path: str | None,
        filter_str: str,
    ) -> Path | None:
        path_str, _ = QFileDialog.getSaveFileName(parent, caption, start_path or "", filter_str)
        return Path(path_str) if path_str else None


class QtFormatDialogService(IFormatDialogService):
    """Qt-backed font-and-color and color pickers."""

    def get_font_and_color(
        self,
        parent: Any | None,
        font: QFont,
        color: QColor,
        on_apply: FontApplyCallback | None = None,
    ) -> tuple[QFont, QColor] | None:
        dlg = FontColorDialog(font, color, parent)
        if on_apply is not None:
            dlg.applied.connect(on_apply)
        try:
            if dlg.exec() != QDialog.DialogCode.Accepted:
                return None
            return dlg.selected_font(), dlg.selected_color()
        finally:
            dlg.deleteLater()

    def get_color(self, parent: Any | None, initial: QColor) -> QColor | None:
        chosen = QColorDialog.getColor(initial, parent, "Text color")
        return chosen if chosen.isValid() else None
