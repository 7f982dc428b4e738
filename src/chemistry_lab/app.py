"""
Chemistry Lab desktop app: logging setup, store build on first start, main window.
"""

from __future__ import annotations

import logging
import os
import sqlite3
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from .db.schema import build_store
from .services.app_state import AppState
from .ui.theme import apply_theme
from .ui.main_window import MainWindow

LOG_LEVEL_ENV = "CHEMISTRY_LAB_LOG_LEVEL"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Stream handler on the root logger; level from $CHEMISTRY_LAB_LOG_LEVEL."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Chemistry Lab")
    apply_theme(app)
    try:
        build_store()
    except (OSError, ValueError, sqlite3.Error) as e:
        logger.exception("Could not build the element store")
        QMessageBox.critical(None, "Chemistry Lab", f"Could not build the element store:\n{e}")
    with AppState() as state:
        window = MainWindow(state)
        window.show()
        sys.exit(app.exec())


if __name__ == "__main__":
    main()
