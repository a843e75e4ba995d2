"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from xadrez import __version__
from xadrez.config import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    app.setApplicationName("Xadrez")
    app.setApplicationVersion(__version__)
    app.setStyle("Fusion")


def run_application(settings: AppSettings, argv: list[str] | None = None) -> int:
    """Open the board window for *settings* and run the Qt event loop.

    Returns the event loop's exit code.
    """
    from PyQt6.QtWidgets import QApplication

    from xadrez.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Board window opened (layout=%r, theme=%s)", settings.layout, settings.board_theme)

    exit_code = app.exec()
    _LOGGER.debug("Qt event loop finished with %d", exit_code)
    return exit_code
