# -*- coding: utf-8 -*-
"""
src/cjkescape/core/classifier.py

Decides which characters count as "Chinese" for the purpose of escaping.

A character is considered Chinese when its code point falls inside one of a
fixed set of CJK-related Unicode blocks. The block table is kept as plain data
so the rest of the application (and the tests) can enumerate it.
"""

from typing import NamedTuple, Tuple, Union


class UnicodeBlock(NamedTuple):
    """An inclusive range of code points with a human-readable name."""
    name: str
    start: int
    end: int

    def contains(self, code_point: int) -> bool:
        return self.start <= code_point <= self.end


# --- Constants ---
CJK_BLOCKS: Tuple[UnicodeBlock, ...] = (
    UnicodeBlock("CJK Unified Ideographs", 0x4E00, 0x9FFF),
    UnicodeBlock("CJK Compatibility Ideographs", 0xF900, 0xFAFF),
    UnicodeBlock("CJK Unified Ideographs Extension A", 0x3400, 0x4DBF),
    UnicodeBlock("CJK Unified Ideographs Extension B", 0x20000, 0x2A6DF),
    UnicodeBlock("CJK Symbols and Punctuation", 0x3000, 0x303F),
    UnicodeBlock("Halfwidth and Fullwidth Forms", 0xFF00, 0xFFEF),
    UnicodeBlock("General Punctuation", 0x2000, 0x206F),
)

MAX_CODE_POINT = 0x10FFFF


def _to_code_point(char: Union[str, int]) -> int:
    """Returns the code point for a one-character string or an int, else -1."""
    if isinstance(char, bool):
        return -1
    if isinstance(char, int):
        return char
    if isinstance(char, str) and len(char) == 1:
        return ord(char)
    return -1


def block_of(char: Union[str, int]):
    """
    Finds the CJK block a character belongs to.

    Args:
        char: A single character or an integer code point.

    Returns:
        The matching UnicodeBlock, or None if the character is outside
        every block in CJK_BLOCKS.
    """
    code_point = _to_code_point(char)
    if not 0 <= code_point <= MAX_CODE_POINT:
        return None
    for block in CJK_BLOCKS:
        if block.contains(code_point):
            return block
    return None


def is_chinese(char: Union[str, int]) -> bool:
    """
    Checks whether a character belongs to one of the CJK blocks.

    Total over its input: anything that is not a single character or a valid
    code point simply classifies as False.
    """
    return block_of(char) is not None
