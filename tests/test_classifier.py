"""Tests for the CJK character classifier."""

import pytest

from cjkescape.core.classifier import CJK_BLOCKS, block_of, is_chinese


@pytest.mark.parametrize("block", CJK_BLOCKS, ids=lambda b: b.name)
def test_block_boundaries_are_inclusive(block):
    """The first and last code point of every block are classified as Chinese."""
    assert is_chinese(block.start)
    assert is_chinese(block.end)
    assert is_chinese(chr(block.start))
    assert is_chinese(chr(block.end))


@pytest.mark.parametrize("code_point", [
    0x4DFF,   # Yijing Hexagram Symbols, between Ext A and Unified
    0x2FFF,   # just below CJK Symbols and Punctuation
    0x3040,   # Hiragana, just after CJK Symbols and Punctuation
    0x1FFF,   # just below General Punctuation
    0x2070,   # just after General Punctuation
    0xFFF0,   # Specials, after Halfwidth and Fullwidth Forms
    0x2A6E0,  # just after Extension B
])
def test_code_points_just_outside_blocks(code_point):
    """Neighbours of the block edges are not Chinese."""
    assert not is_chinese(code_point)


@pytest.mark.parametrize("char", ["中", "文", "世", "界", "，", "。", "！", "’", "　", "𠀀"])
def test_chinese_characters_and_punctuation(char):
    """Ideographs and CJK or general punctuation are classified as Chinese."""
    assert is_chinese(char)


@pytest.mark.parametrize("char", ["a", "Z", "0", " ", "!", ",", "\n", "é", "あ", "한", "😀"])
def test_other_characters(char):
    """ASCII, Latin, kana, hangul and emoji are not Chinese."""
    assert not is_chinese(char)


@pytest.mark.parametrize("value", ["", "中文", -1, 0x110000, 0xD800, 0xDFFF, None, 3.5, True])
def test_invalid_input_classifies_false(value):
    """The predicate is total: odd input is simply not Chinese."""
    assert is_chinese(value) is False


def test_block_of_names_the_block():
    """block_of reports which block a character falls in."""
    assert block_of("中").name == "CJK Unified Ideographs"
    assert block_of("，").name == "Halfwidth and Fullwidth Forms"
    assert block_of("a") is None


def test_block_range_check_keeps_tuple_membership():
    """contains() checks the range; `in` is ordinary tuple membership."""
    block = CJK_BLOCKS[0]
    assert block.contains(0x4E2D)
    assert not block.contains(0x0041)
    assert "CJK Unified Ideographs" in block
    assert "x" not in block
