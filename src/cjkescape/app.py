# -*- coding: utf-8 -*-
"""
src/cjkescape/app.py

Core application controller for CjkEscape.

This module contains `CjkEscapeApp`, which installs the look-and-feel and
creates the converter window, and `main()`, the entry point used by both the
root `main.py` script and the installed `cjkescape` command.
"""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from .config import APP_NAME, Config, configure_logging, get_config
from .gui.main_window import ConverterWindow
from .gui.theme import apply_theme

logger = logging.getLogger(__name__)


class CjkEscapeApp:
    """
    The main application controller. Owns the window and the app-wide look.
    """

    def __init__(self, app: QApplication, config: Optional[Config] = None):
        self.app = app
        self.config = config or get_config()

        self.theme = apply_theme(self.app, self.config.theme)
        self.window = ConverterWindow(self.config)
        logger.info(f"{APP_NAME} window created.")

    def show(self):
        """Shows the converter window."""
        self.window.show()


def main():
    """
    The main entry point for the CjkEscape application.

    Reads the configuration, sets up logging, creates the QApplication and
    the controller, then runs the Qt event loop until the window is closed.
    """
    config = get_config()
    configure_logging(config.log_level)
    logger.info(f"Starting {APP_NAME}. Config file: {config.config_file_path}")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    cjk_escape_app = CjkEscapeApp(app, config)
    cjk_escape_app.show()

    sys.exit(app.exec())
