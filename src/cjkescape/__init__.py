# -*- coding: utf-8 -*-
"""
CjkEscape Application Package.

Converts text between literal Chinese characters and their `\\uXXXX` escape
sequences. The conversion functions live in `cjkescape.core` and have no GUI
dependency; they are re-exported here for convenience:

    from cjkescape import encode, decode
    encode("中文abc")  # '\\u4e2d\\u6587abc'
"""

__version__ = "0.1.0"

from .core import decode, encode, is_chinese

__all__ = ["encode", "decode", "is_chinese"]
