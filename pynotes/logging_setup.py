from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pynotes.utils.constants import LOG_BACKUPS, LOG_FORMAT, LOG_MAX_BYTES

LOGGER_NAME = "pynotes"
SESSION_ID = uuid.uuid4().hex[:8]


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def setup_logging(log_dir: Path | None, level: str = "INFO") -> logging.Logger:
    """Attach file + console handlers to the `pynotes` logger (once per process).

    Module loggers are created with `logging.getLogger(__name__)` and propagate
    here. Pass `log_dir=None` to log to the console only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT)
    session_filter = EnsureSessionFilter()

    ch = logging.StreamHandler(sys.stdout or sys.stderr)
    ch.setLevel(getattr(logging, level.upper(), logging.INFO))
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)
    logger.addHandler(ch)

    log_path: Path | None = None
    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / f"{LOGGER_NAME}.log"
            fh = RotatingFileHandler(
                log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
            )
        except OSError:
            logger.warning("File logging disabled; cannot write to %s", log_dir, exc_info=True)
            log_path = None
        else:
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(fmt)
            fh.addFilter(session_filter)
            logger.addHandler(fh)

    logger.info("Logging initialized. log_file=%s", log_path)
    return logger


def install_global_exception_hooks() -> None:
    log = logging.getLogger(LOGGER_NAME)

    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    from PyQt6.QtCore import QtMsgType, qInstallMessageHandler

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _qt_message_handler(mode, context, message):
        file = getattr(context, "file", None)
        line = getattr(context, "line", None)
        where = f"{file}:{line}" if file else "unknown"
        log.log(levels.get(mode, logging.WARNING), "Qt: %s | where=%s", message, where)

    qInstallMessageHandler(_qt_message_handler)
    log.info("Qt message handler installed")
