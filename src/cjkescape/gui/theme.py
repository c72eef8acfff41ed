# -*- coding: utf-8 -*-
"""
src/cjkescape/gui/theme.py

Look-and-feel installation.

Two flat themes are available: 'light' (IntelliJ-like, the default) and
'dark' (Darcula-like). A theme is the Fusion style plus a palette and a small
stylesheet, applied to the whole QApplication.
"""

import logging
from typing import Dict, NamedTuple

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

logger = logging.getLogger(__name__)


class Theme(NamedTuple):
    name: str
    window: str
    base: str
    text: str
    button: str
    highlight: str
    border: str


THEMES: Dict[str, Theme] = {
    "light": Theme(
        name="light",
        window="#F2F2F2",
        base="#FFFFFF",
        text="#000000",
        button="#FFFFFF",
        highlight="#2675BF",
        border="#C4C4C4",
    ),
    "dark": Theme(
        name="dark",
        window="#3C3F41",
        base="#2B2B2B",
        text="#BBBBBB",
        button="#4C5052",
        highlight="#4B6EAF",
        border="#5E6060",
    ),
}
DEFAULT_THEME = "light"


def resolve_theme(name: str) -> Theme:
    """Looks up a theme by name, falling back to the default theme."""
    theme = THEMES.get((name or "").strip().lower())
    if theme is None:
        logger.warning(f"Unknown theme '{name}', falling back to '{DEFAULT_THEME}'.")
        theme = THEMES[DEFAULT_THEME]
    return theme


def build_palette(theme: Theme) -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(theme.window))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(theme.text))
    palette.setColor(QPalette.ColorRole.Base, QColor(theme.base))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(theme.window))
    palette.setColor(QPalette.ColorRole.Text, QColor(theme.text))
    palette.setColor(QPalette.ColorRole.Button, QColor(theme.button))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(theme.text))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(theme.highlight))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#FFFFFF"))
    return palette


def build_stylesheet(theme: Theme) -> str:
    return f"""
        QGroupBox {{
            border: 1px solid {theme.border};
            border-radius: 3px;
            margin-top: 1.2em;
        }}
        QGroupBox::title {{
            subcontrol-origin: margin;
            left: 8px;
            padding: 0 3px;
        }}
        QPushButton {{
            border: 1px solid {theme.border};
            border-radius: 4px;
            padding: 4px 12px;
        }}
        QPushButton:hover {{
            border-color: {theme.highlight};
        }}
    """


def apply_theme(app: QApplication, name: str) -> Theme:
    """
    Installs the named theme on the application.

    Args:
        app (QApplication): The running application instance.
        name (str): 'light' or 'dark'. Anything else falls back to 'light'.

    Returns:
        Theme: The theme that was actually installed.
    """
    theme = resolve_theme(name)
    app.setStyle("Fusion")
    app.setPalette(build_palette(theme))
    app.setStyleSheet(build_stylesheet(theme))
    logger.info(f"Installed look-and-feel theme '{theme.name}'.")
    return theme
