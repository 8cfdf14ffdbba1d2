from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pynotes.di.container import Container
from pynotes.logging_setup import install_global_exception_hooks, setup_logging
from pynotes.services.config import build_app_config
from pynotes.utils.constants import APP_NAME, APP_ORG


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps logging and Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    setup_logging(config.log_dir(), config.log_level())
    install_global_exception_hooks()
    log = logging.getLogger(__name__)
    log.info("Starting %s %s (config=%s)", APP_NAME, config.get_version(), config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional note to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    code = app.exec()
    log.info("Exiting with code %s", code)
    return code
