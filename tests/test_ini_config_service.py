# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from pynotes.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture()
def user_cfg_dir(monkeypatch, tmp_path: Path) -> Path:
    """Point platformdirs' user config dir into tmp."""
    base = tmp_path / "usercfg"

    def fake_user_config_dir(appname: str) -> str:
        return str(base / appname)

    monkeypatch.setattr(
        "pynotes.services.config.ini_config_service.user_config_dir", fake_user_config_dir
    )
    return base / IniConfigService.DEFAULT_APP_DIR


def test_defaults_when_no_config_files(user_cfg_dir: Path):
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
    assert cfg.loaded_from is None

    # getters with defaults
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get("notes", "directory") is None
    assert cfg.get("logging", "level") == "INFO"
    assert cfg.get_int("app", "nonint", 42) == 42
    assert cfg.get_bool("app", "nope", False) is False
    assert isinstance(cfg.as_dict(), dict)


def test_project_root_config_is_used_when_present(user_cfg_dir: Path, tmp_path: Path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[app]\nversion = 1.2.3\n[notes]\ndirectory = MyNotes\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "1.2.3"
    assert cfg.get("notes", "directory") == "MyNotes"
    assert cfg.loaded_from == ini


def test_platformdirs_preferred_over_project_root(user_cfg_dir: Path, tmp_path: Path):
    plat_path = user_cfg_dir / IniConfigService.DEFAULT_FILE
    proj_root = tmp_path / "repo"
    write_ini(plat_path, "[app]\nversion = 2.0.0\n")
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "2.0.0"
    assert cfg.loaded_from == plat_path


def test_explicit_path_overrides_everything(user_cfg_dir: Path, tmp_path: Path):
    proj_root = tmp_path / "repo"
    explicit_path = tmp_path / "explicit.ini"
    write_ini(user_cfg_dir / IniConfigService.DEFAULT_FILE, "[app]\nversion = 2.0.0\n")
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")
    write_ini(explicit_path, "[app]\nversion = 9.9.9\n")

    cfg = IniConfigService(explicit_path=explicit_path, project_root=proj_root)
    assert cfg.app_version() == "9.9.9"
    assert cfg.loaded_from == explicit_path


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42),
        ("  7  ", 7),
        ("notanint", None),
        ("", None),
    ],
)
def test_get_int_parsing(user_cfg_dir: Path, raw, expected):
    write_ini(user_cfg_dir / IniConfigService.DEFAULT_FILE, f"[limits]\nmax = {raw}\n")
    cfg = IniConfigService()
    assert cfg.get_int("limits", "max", None) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        ("yes", True),
        ("on", True),
        ("false", False),
        ("off", False),
        ("0", False),
        ("maybe", None),
        ("", None),
    ],
)
def test_get_bool_parsing(user_cfg_dir: Path, raw, expected):
    write_ini(user_cfg_dir / IniConfigService.DEFAULT_FILE, f"[feature]\nenabled = {raw}\n")
    cfg = IniConfigService()
    assert cfg.get_bool("feature", "enabled", None) is expected


def test_as_dict_snapshot(user_cfg_dir: Path):
    write_ini(
        user_cfg_dir / IniConfigService.DEFAULT_FILE,
        "[app]\nversion = 3.1.4\n\n[logging]\nlevel = DEBUG\ndirectory = logs\n",
    )
    snap = IniConfigService().as_dict()
    assert snap["app"]["version"] == "3.1.4"
    assert snap["logging"] == {"level": "DEBUG", "directory": "logs"}


def test_malformed_config_falls_through_to_next_candidate(user_cfg_dir: Path, tmp_path: Path):
    write_ini(user_cfg_dir / IniConfigService.DEFAULT_FILE, "this is not INI at all")
    proj_root = tmp_path / "repo"
    good = proj_root / "config" / "config.ini"
    write_ini(good, "[app]\nversion = 5.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.loaded_from == good
    assert cfg.app_version() == "5.0.0"


def test_malformed_config_alone_gives_defaults(user_cfg_dir: Path):
    write_ini(user_cfg_dir / IniConfigService.DEFAULT_FILE, "[broken\nkey")
    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.app_version() == "0.0.0"
