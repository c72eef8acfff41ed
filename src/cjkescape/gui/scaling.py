# -*- coding: utf-8 -*-
"""
src/cjkescape/gui/scaling.py

DPI scaling helpers.

Sizes throughout the GUI are written for a 96 DPI screen (100% scaling) and
converted to device pixels here.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QApplication

logger = logging.getLogger(__name__)

BASE_DENSITY = 96  # 96 DPI is 100% scaling


def screen_dpi() -> float:
    """Returns the primary screen's logical DPI, or BASE_DENSITY without a screen."""
    screen = QApplication.primaryScreen() if QApplication.instance() else None
    if not screen:
        logger.debug("No primary screen found, assuming base density.")
        return float(BASE_DENSITY)
    return screen.logicalDotsPerInch()


def scale(pixels: int, dpi: Optional[float] = None) -> int:
    """
    Converts a size in 96 DPI pixels to the given (or current) screen density.

    Halves round up, so scale(1, 144) == 2.
    """
    if dpi is None:
        dpi = screen_dpi()
    return int(pixels * dpi / BASE_DENSITY + 0.5)
