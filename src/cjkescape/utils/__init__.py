# -*- coding: utf-8 -*-
"""
The Utilities Package for CjkEscape.

Helpers that support the GUI but are not part of the conversion engine.

Modules:
- clipboard_manager: Copies conversion results to the system clipboard.
"""

from .clipboard_manager import copy_to_clipboard

__all__ = [
    "copy_to_clipboard",
]
