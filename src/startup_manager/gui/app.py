"""Main Qt application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from ..__version__ import __version__
from ..core.manager import StartupManager

logger = logging.getLogger(__name__)


def run(manager: StartupManager) -> int:
    """Run the application."""
    from .main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName("Startup Manager")
    app.setApplicationVersion(__version__)
    logger.info(f"Startup Manager {__version__} on {manager.platform.value}")

    main_window = MainWindow(manager)
    main_window.show()

    return app.exec()
