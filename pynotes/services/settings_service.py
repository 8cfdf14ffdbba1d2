from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from pynotes.domain.interfaces import ISettingsService
from pynotes.utils.constants import SETTINGS_GEOMETRY, SETTINGS_LIST_HEADER, SETTINGS_SPLITTER


class SettingsService(ISettingsService):
    """Window layout memory: geometry, list/editor splitter and grid columns.

    Values are opaque Qt state blobs; anything else found under a key (e.g. a
    hand-edited INI) is treated as missing.
    """

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def _blob(self, key: str) -> bytes | None:
        v = self._s.value(key)
        return bytes(v) if isinstance(v, QByteArray) else None

    def _store(self, key: str, blob: bytes) -> None:
        self._s.setValue(key, QByteArray(blob))

    def get_geometry(self) -> bytes | None:
        return self._blob(SETTINGS_GEOMETRY)

    def set_geometry(self, blob: bytes) -> None:
        self._store(SETTINGS_GEOMETRY, blob)

    def get_splitter(self) -> bytes | None:
        return self._blob(SETTINGS_SPLITTER)

    def set_splitter(self, blob: bytes) -> None:
        self._store(SETTINGS_SPLITTER, blob)

    def get_list_header(self) -> bytes | None:
        return self._blob(SETTINGS_LIST_HEADER)

    def set_list_header(self, blob: bytes) -> None:
        self._store(SETTINGS_LIST_HEADER, blob)

    def sync(self) -> None:
        self._s.sync()
