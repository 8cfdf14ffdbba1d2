from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from pynotes.logging_setup import LOGGER_NAME, SESSION_ID, install_global_exception_hooks, setup_logging


@pytest.fixture()
def fresh_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    try:
        yield logger
    finally:
        for h in logger.handlers:
            h.close()
        logger.handlers[:] = saved


def test_setup_creates_console_and_rotating_file(fresh_logger, tmp_path: Path):
    logger = setup_logging(tmp_path / "logs", "warning")

    assert logger is fresh_logger
    files = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(files) == 1
    assert Path(files[0].baseFilename) == tmp_path / "logs" / "pynotes.log"
    console = [h for h in logger.handlers if not isinstance(h, RotatingFileHandler)]
    assert console and console[0].level == logging.WARNING


def test_setup_is_idempotent(fresh_logger, tmp_path: Path):
    setup_logging(tmp_path, "INFO")
    count = len(fresh_logger.handlers)
    setup_logging(tmp_path, "DEBUG")
    assert len(fresh_logger.handlers) == count


def test_module_records_carry_session_id(fresh_logger, tmp_path: Path):
    setup_logging(tmp_path, "INFO")
    logging.getLogger("pynotes.services.note_store").info("hello from a module")
    for h in fresh_logger.handlers:
        h.flush()

    text = (tmp_path / "pynotes.log").read_text(encoding="utf-8")
    assert "hello from a module" in text
    assert f"sid={SESSION_ID}" in text
    assert "| INFO | pynotes.services.note_store |" in text


def test_console_only_when_no_directory(fresh_logger):
    setup_logging(None)
    assert not any(isinstance(h, RotatingFileHandler) for h in fresh_logger.handlers)


def test_unwritable_log_directory_falls_back_to_console(fresh_logger, tmp_path: Path):
    blocker = tmp_path / "logs"
    blocker.write_text("file in the way", encoding="utf-8")
    setup_logging(blocker)
    assert not any(isinstance(h, RotatingFileHandler) for h in fresh_logger.handlers)


def test_exception_hook_logs_uncaught_errors(fresh_logger, monkeypatch, qapp):
    installed = []
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(sys, "__excepthook__", lambda *a: None)
    monkeypatch.setattr(
        "PyQt6.QtCore.qInstallMessageHandler", lambda handler: installed.append(handler)
    )
    seen: list[logging.LogRecord] = []

    class Collect(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            seen.append(record)

    fresh_logger.addHandler(Collect())
    fresh_logger.setLevel(logging.DEBUG)

    install_global_exception_hooks()
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        sys.excepthook(type(e), e, e.__traceback__)

    assert installed, "Qt message handler was not installed"
    assert any(r.levelno == logging.CRITICAL and r.exc_info for r in seen)
