from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_log_dir

from pynotes.domain.interfaces import IAppConfig
from pynotes.services.config.ini_config_service import IniConfigService
from pynotes.utils.constants import NOTES_DIR_NAME

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _project_root_fallback() -> Path:
    """
    Directory the application runs from, also under PyInstaller:
      - a frozen build keeps its notes next to the executable
      - dev mode walks up from this file to the repository root
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    # app_config.py -> pynotes/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService and resolves values against the project root.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) [app] version from the INI
      3) "0.0.0"

    The notes directory defaults to "<project_root>/Notes", the directory the
    application is installed in, and may be overridden by [notes] directory.
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v
        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2
        return "0.0.0"

    def notes_dir(self) -> Path:
        return self._resolve(self.ini.get("notes", "directory"), self.project_root / NOTES_DIR_NAME)

    def log_dir(self) -> Path:
        return self._resolve(self.ini.get("logging", "directory"), Path(user_log_dir("PyNotes")))

    def log_level(self) -> str:
        level = (self.ini.get("logging", "level", "INFO") or "INFO").strip().upper()
        return level if level in _LEVELS else "INFO"

    def _resolve(self, raw: str | None, default: Path) -> Path:
        if not raw or not raw.strip():
            return default
        p = Path(raw.strip()).expanduser()
        return p if p.is_absolute() else self.project_root / p

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
