from __future__ import annotations

from .char_style import ApplyCharStyle, ApplyColor, ApplyFontAndColor, CharStyle
from .insert_datetime import InsertDateTime
from .insert_image import InsertImage

__all__ = [
    "CharStyle",
    "ApplyCharStyle",
    "ApplyFontAndColor",
    "ApplyColor",
    "InsertDateTime",
    "InsertImage",
]
