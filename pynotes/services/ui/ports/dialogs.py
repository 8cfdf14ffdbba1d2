from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from PyQt6.QtGui import QColor, QFont

FontApplyCallback = Callable[[QFont, QColor], None]


@runtime_checkable
class IFileDialogService(Protocol):
    """
    Abstract UI port for file dialogs. Keeps the rest of the app decoupled from Qt widgets.
    """

    def get_open_file(
        self,
        parent: Any | None,
        caption: str,
        start_dir: str | None,
        filter_str: str,
    ) -> Path | None:
        """Return a selected file path or None if cancelled."""
        ...

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        start_path: str | None,
        filter_str: str,
    ) -> Path | None:
        """Return a selected destination path or None if cancelled."""
        ...


@runtime_checkable
class IFormatDialogService(Protocol):
    """Abstract UI port for the font-and-color and plain color pickers."""

    def get_font_and_color(
        self,
        parent: Any | None,
        font: QFont,
        color: QColor,
        on_apply: FontApplyCallback | None = None,
    ) -> tuple[QFont, QColor] | None:
        """Modal picker. `on_apply` fires for every Apply click; OK returns the choice."""
        ...

    def get_color(self, parent: Any | None, initial: QColor) -> QColor | None:
        """Return the chosen color or None if cancelled."""
        ...
