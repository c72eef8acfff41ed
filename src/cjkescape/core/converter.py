# -*- coding: utf-8 -*-
"""
src/cjkescape/core/converter.py

The conversion engine: literal CJK text to `\\uXXXX` escapes and back.

Both functions are pure and total. They never raise, hold no state between
calls, and always return a new string.

Code points above U+FFFF (CJK Extension B) do not fit into four hex digits.
They are written as a UTF-16 surrogate pair of two escapes, and the decoder
joins such a pair back into one character, so text survives a round trip.
"""

import logging
import re

from .classifier import is_chinese

logger = logging.getLogger(__name__)

# Exactly four hex digits after a backslash-u, matched left to right.
ESCAPE_PATTERN = re.compile(r"\\u([0-9a-fA-F]{4})")

# A high-surrogate escape directly followed by a low-surrogate escape.
_SURROGATE_PAIR_PATTERN = re.compile(
    r"\\u([dD][89abAB][0-9a-fA-F]{2})\\u([dD][c-fC-F][0-9a-fA-F]{2})"
)

_BMP_LIMIT = 0xFFFF


def _escape_code_point(code_point: int) -> str:
    """Formats a code point as one escape, or two for a surrogate pair."""
    if code_point <= _BMP_LIMIT:
        return f"\\u{code_point:04x}"
    offset = code_point - 0x10000
    high = 0xD800 + (offset >> 10)
    low = 0xDC00 + (offset & 0x3FF)
    return f"\\u{high:04x}\\u{low:04x}"


def encode(text: str) -> str:
    """
    Replaces every Chinese character with its lowercase `\\uXXXX` escape.

    Characters outside the CJK blocks are copied through unchanged.

    Args:
        text (str): The text to convert. May be empty.

    Returns:
        str: The escaped text.
    """
    parts = []
    for char in text:
        if is_chinese(char):
            parts.append(_escape_code_point(ord(char)))
        else:
            parts.append(char)
    result = "".join(parts)
    logger.debug(f"Encoded {len(text)} characters into {len(result)}.")
    return result


def _replace_pair(match: "re.Match") -> str:
    high = int(match.group(1), 16)
    low = int(match.group(2), 16)
    return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))


def _replace_escape(match: "re.Match") -> str:
    return chr(int(match.group(1), 16))


def decode(text: str) -> str:
    """
    Replaces every `\\uXXXX` escape with the character it names.

    Matching is case-insensitive on the hex digits and non-overlapping. Any
    malformed escape (too few digits, non-hex characters) is left as-is.
    """
    result = []
    position = 0
    for match in ESCAPE_PATTERN.finditer(text):
        if match.start() < position:
            # Already consumed as the low half of a surrogate pair.
            continue
        result.append(text[position:match.start()])
        pair = _SURROGATE_PAIR_PATTERN.match(text, match.start())
        if pair:
            result.append(_replace_pair(pair))
            position = pair.end()
        else:
            result.append(_replace_escape(match))
            position = match.end()
    result.append(text[position:])
    decoded = "".join(result)
    logger.debug(f"Decoded {len(text)} characters into {len(decoded)}.")
    return decoded
