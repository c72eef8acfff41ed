# -*- coding: utf-8 -*-
"""
The GUI Package for CjkEscape.

This package contains the user interface, built using the PyQt6 framework:
the converter window, the look-and-feel themes and the DPI scaling helpers.
"""

from .main_window import ConverterWindow
from .scaling import scale, screen_dpi
from .theme import apply_theme

__all__ = [
    "ConverterWindow",
    "apply_theme",
    "scale",
    "screen_dpi",
]
