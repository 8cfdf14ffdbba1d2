from __future__ import annotations

import logging
import re
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile
from PyQt6.QtGui import QTextDocument

from pynotes.domain.errors import NoteFormatError, NoteIOError, NoteNotFoundError
from pynotes.domain.interfaces import INoteStore
from pynotes.domain.models import NoteFormat, NoteListing, NoteRecord
from pynotes.utils.constants import WELCOME_NOTE_NAME, WELCOME_TEXT

log = logging.getLogger(__name__)

# Qt's own HTML export always carries one of these; hand-written markup usually does too.
_HTML_MARKER_RE = re.compile(r"<\s*(!doctype\s+html|html|body|p|span|div|br|img)\b", re.IGNORECASE)


class NoteStore(INoteStore):
    """Reads, writes and lists note files inside one flat directory."""

    def __init__(self, notes_dir: Path) -> None:
        self._dir = Path(notes_dir).resolve()

    @property
    def notes_dir(self) -> Path:
        return self._dir

    # ---------- Directory ----------

    def ensure_directory(self) -> None:
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise NoteIOError(f"Cannot create notes directory {self._dir}: {e}") from e

    def list_notes(self) -> NoteListing:
        """Scan the directory (no recursion) and return notes newest first.

        Only file metadata is read. A directory removed behind our back is
        reported as NoteIOError rather than an empty listing.
        """
        try:
            candidates = [
                p for p in self._dir.iterdir() if p.is_file() and NoteFormat.is_recognized(p)
            ]
        except FileNotFoundError as e:
            raise NoteIOError(f"Notes directory is missing: {self._dir}") from e
        except OSError as e:
            raise NoteIOError(f"Cannot read notes directory {self._dir}: {e}") from e

        records: list[NoteRecord] = []
        for path in candidates:
            try:
                records.append(NoteRecord.from_path(path))
            except FileNotFoundError:
                # removed between iterdir() and stat()
                continue
        records.sort(key=lambda r: r.last_modified, reverse=True)
        log.debug("Listed %d notes in %s", len(records), self._dir)
        return tuple(records)

    # ---------- Content ----------

    def load_content(self, path: Path) -> QTextDocument:
        fmt = NoteFormat.for_path(path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            raise NoteNotFoundError(path) from None
        except IsADirectoryError:
            raise NoteNotFoundError(path) from None
        except OSError as e:
            raise NoteIOError(f"Cannot read {path}: {e}") from e

        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise NoteFormatError(f"{path.name} is not valid UTF-8 text") from e

        doc = QTextDocument()
        if fmt is NoteFormat.PLAIN:
            doc.setPlainText(text)
        else:
            if text.strip() and not _HTML_MARKER_RE.search(text):
                raise NoteFormatError(f"{path.name} does not contain rich-text markup")
            doc.setHtml(text)
        log.info("Loaded %s (%s)", path, fmt.name)
        return doc

    def save_content(
        self, path: Path, document: QTextDocument, fmt: NoteFormat | None = None
    ) -> None:
        fmt = fmt or NoteFormat.for_path(path)
        text = document.toPlainText() if fmt is NoteFormat.PLAIN else document.toHtml()
        self._write_text_atomic(path, text)
        log.info("Saved %s (%s)", path, fmt.name)

    def delete_note(self, path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            raise NoteNotFoundError(path) from None
        except OSError as e:
            raise NoteIOError(f"Cannot delete {path.name}: {e}") from e
        log.info("Deleted %s", path)

    # ---------- Helpers ----------

    def normalize_target(self, path: Path) -> Path:
        """Give a user-chosen save path a recognized extension (rich by default)."""
        if NoteFormat.is_recognized(path):
            return path
        return path.with_name(path.name + NoteFormat.RICH.extension)

    def create_welcome_note(self) -> Path:
        path = self._dir / WELCOME_NOTE_NAME
        doc = QTextDocument()
        doc.setPlainText(WELCOME_TEXT)
        self.save_content(path, doc, NoteFormat.RICH)
        return path

    def _write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise NoteIOError(f"Cannot open for write: {path} ({sf.errorString()})")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise NoteIOError(f"Commit failed for: {path} ({sf.errorString()})")
