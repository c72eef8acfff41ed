# -*- coding: utf-8 -*-
"""
src/cjkescape/config.py

Module for handling application configuration.

This module defines default settings for CjkEscape, such as the window size,
fonts and the look-and-feel theme. It provides functionality to load
user-defined settings from a configuration file (config.ini), creating one
with default values on the first run.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "CjkEscape"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_THEME = "light"
DEFAULT_WINDOW_WIDTH = 600
DEFAULT_WINDOW_HEIGHT = 500
DEFAULT_TEXT_FONT_FAMILY = "Monospace"
DEFAULT_TEXT_FONT_SIZE = 14
DEFAULT_BUTTON_FONT_FAMILY = "Microsoft YaHei"
DEFAULT_BUTTON_FONT_SIZE = 12

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    - Windows: %APPDATA%/CjkEscape
    - macOS: ~/Library/Application Support/CjkEscape
    - Linux: ~/.config/CjkEscape

    Returns:
        Path: A Path object to the application's data directory.
    """
    if platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":  # macOS
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:  # Linux and other Unix-like
        app_dir = Path.home() / ".config" / APP_NAME
    return app_dir


class Config:
    """
    Manages application configuration by loading defaults and overriding
    them with settings from a user-specific config file.
    """

    def __init__(self, app_dir: Optional[Path] = None):
        """
        Initializes the configuration manager.

        Args:
            app_dir (Path, optional): Directory holding config.ini. Defaults
                                      to the per-platform app directory.
        """
        self.parser = configparser.ConfigParser(interpolation=None)
        self.app_dir = Path(app_dir) if app_dir is not None else get_app_dir()
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Sets the default configuration values in the parser object."""
        self.parser["General"] = {
            "log_level": DEFAULT_LOG_LEVEL
        }
        self.parser["Display"] = {
            "theme": DEFAULT_THEME,
            "window_width": str(DEFAULT_WINDOW_WIDTH),
            "window_height": str(DEFAULT_WINDOW_HEIGHT),
            "text_font_family": DEFAULT_TEXT_FONT_FAMILY,
            "text_font_size": str(DEFAULT_TEXT_FONT_SIZE),
            "button_font_family": DEFAULT_BUTTON_FONT_FAMILY,
            "button_font_size": str(DEFAULT_BUTTON_FONT_SIZE),
        }

    def _load_from_file(self):
        """
        Loads settings from the config.ini file, overriding defaults.
        If the file doesn't exist, it will be created with default values.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
            return
        try:
            self.parser.read(self.config_file_path, encoding="utf-8")
        except configparser.Error as e:
            logger.warning(f"Could not parse {self.config_file_path}, using defaults. Error: {e}")
            self._load_defaults()

    def _save_defaults(self):
        """Saves the current (default) configuration to the config file."""
        try:
            self.app_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# You can edit these values. Restart the app for changes to take effect.\n\n")
                self.parser.write(configfile)
        except OSError as e:
            # Non-critical: the defaults are still in memory.
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    def _get_int(self, section: str, key: str, default: int) -> int:
        try:
            value = self.parser.getint(section, key, fallback=default)
        except ValueError:
            logger.warning(f"Invalid integer for [{section}] {key}, using {default}.")
            return default
        if value <= 0:
            logger.warning(f"Non-positive value for [{section}] {key}, using {default}.")
            return default
        return value

    # --- Properties to access settings easily and with correct types ---

    @property
    def log_level(self) -> int:
        """The root logging level, as a logging module constant."""
        name = self.parser.get("General", "log_level", fallback=DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning(f"Unknown log level '{name}', using {DEFAULT_LOG_LEVEL}.")
            return logging.INFO
        return level

    @property
    def theme(self) -> str:
        """The look-and-feel theme name ('light' or 'dark')."""
        return self.parser.get("Display", "theme", fallback=DEFAULT_THEME).strip().lower()

    @property
    def window_width(self) -> int:
        """Initial window width in logical (96 DPI) pixels."""
        return self._get_int("Display", "window_width", DEFAULT_WINDOW_WIDTH)

    @property
    def window_height(self) -> int:
        """Initial window height in logical (96 DPI) pixels."""
        return self._get_int("Display", "window_height", DEFAULT_WINDOW_HEIGHT)

    @property
    def text_font_family(self) -> str:
        return self.parser.get("Display", "text_font_family", fallback=DEFAULT_TEXT_FONT_FAMILY)

    @property
    def text_font_size(self) -> int:
        return self._get_int("Display", "text_font_size", DEFAULT_TEXT_FONT_SIZE)

    @property
    def button_font_family(self) -> str:
        return self.parser.get("Display", "button_font_family", fallback=DEFAULT_BUTTON_FONT_FAMILY)

    @property
    def button_font_size(self) -> int:
        return self._get_int("Display", "button_font_size", DEFAULT_BUTTON_FONT_SIZE)


# --- Shared Instance ---
_config: Optional[Config] = None


def get_config() -> Config:
    """Returns the process-wide Config, creating it on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def configure_logging(level: int) -> None:
    """Configures the root logger for the application."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
