# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from locationtracker.config import load_config
from locationtracker.constants import APP_NAME, APP_VERSION
from locationtracker.gui.controller import AppController
from locationtracker.gui.main_window import MainWindow
from locationtracker.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback) -> None:
    """Log fatal errors and keep a copy of the last crash on disk."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    try:
        crash_path.parent.mkdir(parents=True, exist_ok=True)
        crash_path.write_text(error_msg, encoding="utf-8")
    except OSError:
        logging.getLogger().exception("Could not write crash report to %s", crash_path)

    if QApplication.instance():
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main() -> int:
    """Start the GUI application."""
    settings = load_config()
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME, settings.get("logging", {}).get("level"))
    sys.excepthook = global_exception_handler
    logger = logging.getLogger(__name__)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    controller = AppController.from_settings(settings)
    result = controller.load()
    window = MainWindow(controller, settings=settings)
    if not result.ok:
        window.show_error(result.message)
    window.show()
    app.aboutToQuit.connect(controller.shutdown)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
