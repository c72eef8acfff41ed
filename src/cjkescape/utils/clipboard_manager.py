# -*- coding: utf-8 -*-
"""
src/cjkescape/utils/clipboard_manager.py

A simple wrapper utility for interacting with the system clipboard.

This module centralizes clipboard operations using the 'pyperclip' library,
so the converter window can hand a conversion result to other programs
without caring whether a clipboard is actually available.
"""

import logging

import pyperclip

# The application's entry point configures the root logger.
logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copies the given text to the system clipboard.

    Args:
        text (str): The string to be copied.

    Returns:
        bool: True if the text was copied successfully, False otherwise.
    """
    try:
        pyperclip.copy(text)
        logger.info(f"Copied {len(text)} characters to clipboard.")
        return True
    except pyperclip.PyperclipException as e:
        # No clipboard mechanism on this system (e.g. xclip/xsel missing on Linux).
        logger.error(f"Failed to copy text to clipboard: {e}")
        logger.warning(
            "Clipboard functionality may not be available on this system. "
            "If on Linux, please ensure 'xclip' or 'xsel' is installed."
        )
        return False
