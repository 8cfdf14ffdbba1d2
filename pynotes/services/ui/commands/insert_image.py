from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice, QUrl
from PyQt6.QtGui import QImage, QTextCursor, QTextDocument, QTextImageFormat

from pynotes.domain.errors import ImageDecodeError

DATA_URL_PREFIX = "data:image/png;base64,"


def encode_png(image: QImage) -> QByteArray:
    data = QByteArray()
    buf = QBuffer(data)
    buf.open(QIODevice.OpenModeFlag.WriteOnly)
    ok = image.save(buf, "PNG")
    buf.close()
    if not ok:
        raise ImageDecodeError("Image could not be re-encoded as PNG")
    return data


@dataclass(frozen=True)
class InsertImage:
    """
    Command: decode an image file, normalize it to PNG and place it at the caret.

    The image is named by its own data: URL, so the rich-text export carries the
    pixels inline and a reload needs no side files.
    """

    cursor: QTextCursor
    image_path: Path

    def execute(self) -> str:
        image = QImage(str(self.image_path))
        if image.isNull():
            raise ImageDecodeError(f"Cannot decode image: {self.image_path.name}")

        png = encode_png(image)
        name = DATA_URL_PREFIX + bytes(png.toBase64()).decode("ascii")
        normalized = QImage.fromData(png, "PNG")

        doc = self.cursor.document()
        doc.addResource(QTextDocument.ResourceType.ImageResource.value, QUrl(name), normalized)
        fmt = QTextImageFormat()
        fmt.setName(name)
        fmt.setWidth(normalized.width())
        fmt.setHeight(normalized.height())
        self.cursor.insertImage(fmt)
        return name
