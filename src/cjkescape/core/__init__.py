# -*- coding: utf-8 -*-
"""
The Core Conversion Package for CjkEscape.

This package holds the only real logic of the application: the classifier
that decides which characters are Chinese, and the pair of pure text
transforms built on it. Nothing here depends on the GUI, so the functions
can be used directly from scripts or other programs.

Modules within this package:
- `classifier`: The CJK block table and the `is_chinese` predicate.
- `converter`: `encode` (characters to escapes) and `decode` (escapes to
  characters).
"""

from .classifier import CJK_BLOCKS, UnicodeBlock, block_of, is_chinese
from .converter import ESCAPE_PATTERN, decode, encode

__all__ = [
    "CJK_BLOCKS",
    "UnicodeBlock",
    "block_of",
    "is_chinese",
    "ESCAPE_PATTERN",
    "encode",
    "decode",
]
