# -*- coding: utf-8 -*-
"""
src/cjkescape/gui/main_window.py

Defines the ConverterWindow, the application's only window.

The window holds two text panes: the top one for literal Chinese text and
the bottom one for its `\\uXXXX` escaped form. The buttons between them run a
conversion from one pane into the other, overwriting the destination pane,
clear both panes, or copy the last result to the clipboard.
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtGui import QFont, QGuiApplication, QIcon, QTextOption
from PyQt6.QtWidgets import (
    QGroupBox, QHBoxLayout, QMainWindow, QPlainTextEdit, QPushButton,
    QVBoxLayout, QWidget,
)

from ..config import Config
from ..core.converter import decode, encode
from ..utils.clipboard_manager import copy_to_clipboard
from .scaling import scale

logger = logging.getLogger(__name__)

# --- Constants ---
WINDOW_TITLE = "中文/Unicode双向转换工具"
CHINESE_PANE_TITLE = "中文输入框"
UNICODE_PANE_TITLE = "Unicode输入框"
TO_UNICODE_LABEL = "中文 → Unicode"
TO_CHINESE_LABEL = "Unicode → 中文"
CLEAR_LABEL = "清空"
COPY_LABEL = "复制结果"
STATUS_TIMEOUT_MS = 3000

ICON_FILE = Path(__file__).resolve().parent.parent / "assets" / "logo.png"


class ConverterWindow(QMainWindow):
    """
    Main window with a Chinese pane, an escaped pane and the action buttons.
    """

    def __init__(self, config: Config, dpi: Optional[float] = None, parent: QWidget = None):
        """
        Initializes the converter window.

        Args:
            config (Config): Supplies window size and fonts.
            dpi (float, optional): Screen density to scale for. Defaults to
                                   the primary screen's density.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.config = config
        self.dpi = dpi
        # The pane most recently written by a conversion; the copy target.
        self.last_output: Optional[QPlainTextEdit] = None

        self._setup_window_properties()
        self._setup_ui()
        self._connect_signals()
        self._position_window()

    def _scale(self, pixels: int) -> int:
        return scale(pixels, self.dpi)

    def _setup_window_properties(self):
        """Sets the title, size and icon."""
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(self._scale(self.config.window_width), self._scale(self.config.window_height))

        if ICON_FILE.exists():
            self.setWindowIcon(QIcon(str(ICON_FILE)))
        else:
            logger.debug(f"Icon file not found at {ICON_FILE}, using theme icon.")
            self.setWindowIcon(QIcon.fromTheme("accessories-text-editor"))

    def _setup_ui(self):
        """Creates and arranges the panes and buttons."""
        self.chinese_area = self._create_text_area()
        self.unicode_area = self._create_text_area()

        self.to_unicode_button = self._create_button(TO_UNICODE_LABEL)
        self.to_chinese_button = self._create_button(TO_CHINESE_LABEL)
        self.clear_button = self._create_button(CLEAR_LABEL)
        self.copy_button = self._create_button(COPY_LABEL)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)

        # Panes take the spare height equally; the button row stays compact.
        layout.addWidget(self._create_titled_pane(CHINESE_PANE_TITLE, self.chinese_area), 1)

        button_row = QHBoxLayout()
        button_row.setSpacing(10)
        button_row.addStretch()
        for button in (self.to_unicode_button, self.to_chinese_button,
                       self.clear_button, self.copy_button):
            button_row.addWidget(button)
        button_row.addStretch()
        layout.addLayout(button_row)

        layout.addWidget(self._create_titled_pane(UNICODE_PANE_TITLE, self.unicode_area), 1)

        self.setCentralWidget(central)
        self.statusBar()

    def _create_text_area(self) -> QPlainTextEdit:
        area = QPlainTextEdit(self)
        area.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        area.setWordWrapMode(QTextOption.WrapMode.WordWrap)
        area.setViewportMargins(5, 5, 5, 5)
        font = QFont(self.config.text_font_family)
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setPixelSize(self._scale(self.config.text_font_size))
        area.setFont(font)
        return area

    def _create_button(self, text: str) -> QPushButton:
        button = QPushButton(text, self)
        font = QFont(self.config.button_font_family)
        font.setPixelSize(self._scale(self.config.button_font_size))
        button.setFont(font)
        return button

    def _create_titled_pane(self, title: str, area: QPlainTextEdit) -> QGroupBox:
        group = QGroupBox(title, self)
        group_layout = QVBoxLayout(group)
        group_layout.addWidget(area)
        return group

    def _connect_signals(self):
        self.to_unicode_button.clicked.connect(self.convert_to_unicode)
        self.to_chinese_button.clicked.connect(self.convert_to_chinese)
        self.clear_button.clicked.connect(self.clear_text_areas)
        self.copy_button.clicked.connect(self.copy_result)

    def _position_window(self):
        """Centres the window on the primary screen, if there is one."""
        screen = QGuiApplication.primaryScreen()
        if not screen:
            logger.debug("No primary screen found; leaving window position to the platform.")
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    # --- Actions ---

    def convert_to_unicode(self):
        """Escapes the Chinese pane into the Unicode pane."""
        self.unicode_area.setPlainText(encode(self.chinese_area.toPlainText()))
        self.last_output = self.unicode_area
        logger.debug("Converted Chinese pane to Unicode escapes.")

    def convert_to_chinese(self):
        """Unescapes the Unicode pane into the Chinese pane."""
        self.chinese_area.setPlainText(decode(self.unicode_area.toPlainText()))
        self.last_output = self.chinese_area
        logger.debug("Converted Unicode escapes to Chinese pane.")

    def clear_text_areas(self):
        """Empties both panes."""
        self.chinese_area.clear()
        self.unicode_area.clear()
        self.last_output = None

    def copy_result(self) -> bool:
        """
        Copies the pane written by the last conversion to the clipboard.

        Falls back to the Unicode pane when nothing has been converted yet.

        Returns:
            bool: True if the clipboard accepted the text.
        """
        area = self.last_output if self.last_output is not None else self.unicode_area
        if copy_to_clipboard(area.toPlainText()):
            self.statusBar().showMessage("已复制到剪贴板", STATUS_TIMEOUT_MS)
            return True
        self.statusBar().showMessage("无法访问剪贴板", STATUS_TIMEOUT_MS)
        return False
