"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from wechess.ui.styles.theme import APP_STYLE

    app.setApplicationName("WeChess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from wechess.ui.main_window import MainWindow

    _configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.info("WeChess started")

    return app.exec()
