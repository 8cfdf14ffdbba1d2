from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QDialog,
    QDialogButtonBox,
    QFontComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)


class FontColorDialog(QDialog):
    """Font, size, style and color in one modal picker with an Apply button.

    `applied` is emitted on every Apply click so the caller can restyle the
    selection while the dialog stays open.
    """

    applied = pyqtSignal(QFont, QColor)

    def __init__(self, font: QFont, color: QColor, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Font")
        self.setModal(True)
        self._color = QColor(color)

        # Widgets
        self.family_combo = QFontComboBox(self)
        self.family_combo.setCurrentFont(font)
        self.size_spin = QSpinBox(self)
        self.size_spin.setRange(1, 400)
        # pointSizeF() is -1 for pixel-sized fonts
        self.size_spin.setValue(round(font.pointSizeF()) if font.pointSizeF() > 0 else 12)
        self.bold_cb = QCheckBox("Bold", self)
        self.bold_cb.setChecked(font.bold())
        self.italic_cb = QCheckBox("Italic", self)
        self.italic_cb.setChecked(font.italic())
        self.underline_cb = QCheckBox("Underline", self)
        self.underline_cb.setChecked(font.underline())
        self.strike_cb = QCheckBox("Strikethrough", self)
        self.strike_cb.setChecked(font.strikeOut())
        self.color_btn = QPushButton(self)
        self.preview = QLabel("AaBbYyZz", self)
        self.preview.setMinimumHeight(48)

        self.buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok
            | QDialogButtonBox.StandardButton.Apply
            | QDialogButtonBox.StandardButton.Cancel,
            parent=self,
        )

        # Layout
        form = QGridLayout()
        form.addWidget(QLabel("Font:"), 0, 0)
        form.addWidget(self.family_combo, 0, 1, 1, 3)
        form.addWidget(QLabel("Size:"), 1, 0)
        form.addWidget(self.size_spin, 1, 1)
        form.addWidget(QLabel("Color:"), 1, 2)
        form.addWidget(self.color_btn, 1, 3)

        styles = QHBoxLayout()
        for cb in (self.bold_cb, self.italic_cb, self.underline_cb, self.strike_cb):
            styles.addWidget(cb)
        styles.addStretch(1)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addLayout(styles)
        root.addWidget(self.preview)
        root.addWidget(self.buttons)

        # Signals
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        apply_btn = self.buttons.button(QDialogButtonBox.StandardButton.Apply)
        apply_btn.clicked.connect(self._emit_applied)
        self.color_btn.clicked.connect(self._pick_color)
        self.family_combo.currentFontChanged.connect(self._update_preview)
        self.size_spin.valueChanged.connect(self._update_preview)
        for cb in (self.bold_cb, self.italic_cb, self.underline_cb, self.strike_cb):
            cb.toggled.connect(self._update_preview)

        self._update_preview()

    # ---------- Result ----------

    def selected_font(self) -> QFont:
        f = QFont(self.family_combo.currentFont())
        f.setPointSize(self.size_spin.value())
        f.setBold(self.bold_cb.isChecked())
        f.setItalic(self.italic_cb.isChecked())
        f.setUnderline(self.underline_cb.isChecked())
        f.setStrikeOut(self.strike_cb.isChecked())
        return f

    def selected_color(self) -> QColor:
        return QColor(self._color)

    def set_color(self, color: QColor) -> None:
        self._color = QColor(color)
        self._update_preview()

    # ---------- Internals ----------

    def _emit_applied(self) -> None:
        self.applied.emit(self.selected_font(), self.selected_color())

    def _pick_color(self) -> None:
        chosen = QColorDialog.getColor(self._color, self, "Text color")
        if chosen.isValid():
            self.set_color(chosen)

    def _update_preview(self, *_args) -> None:
        self.preview.setFont(self.selected_font())
        self.preview.setStyleSheet(f"color: {self._color.name()};")
        self.color_btn.setText(self._color.name())
