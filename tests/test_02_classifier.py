#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for line and block classification."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from newsroom.schemas import ContentBlock, TextContent
from newsroom.services.content import (
    Category, Unit, classify_block, classify_line, clean_text, iter_units,
)


# =============================================================================
# Image placeholders
# =============================================================================

@pytest.mark.parametrize("line, index", [
    ("[[img:1]]", 1),
    ("[[img:12]]", 12),
    ("[[ img : 3 ]]", 3),
    ("[[IMG:2]]", 2),
    ("[[Img:0]]", 0),
    ("   [[img:4]]   ", 4),
])
def test_placeholder_lines(line, index):
    assert classify_line(line) == Unit(Category.IMAGE, image_index=index)


@pytest.mark.parametrize("line", [
    "[[img:-1]]",
    "[[img:x]]",
    "[[img:1]] trailing text",
    "see [[img:1]]",
    "[img:1]",
    "[[img:\u0661]]",
    "[[img:\uff11]]",
])
def test_non_placeholder_lines_are_paragraphs(line):
    assert classify_line(line).category is Category.PARAGRAPH


# =============================================================================
# Headings / lists / paragraphs
# =============================================================================

def test_heading_marker_is_stripped():
    assert classify_line("## Big news") == Unit(Category.HEADING, "Big news")


def test_heading_marker_needs_space():
    assert classify_line("##Big news").category is Category.PARAGRAPH


def test_single_hash_is_paragraph():
    assert classify_line("# Title").category is Category.PARAGRAPH


@pytest.mark.parametrize("line, text", [
    ("- apples", "apples"),
    ("* pears", "pears"),
    ("-   spaced", "spaced"),
])
def test_bullet_items(line, text):
    assert classify_line(line) == Unit(Category.BULLET, text)


@pytest.mark.parametrize("line, text", [
    ("1. first", "first"),
    ("42. answer", "answer"),
])
def test_numbered_items(line, text):
    assert classify_line(line) == Unit(Category.NUMBERED, text)


@pytest.mark.parametrize("line", [
    "-no space",
    "*italic* start",
    "**bold** start",
    "1.no space",
    "1) paren",
    "-",
])
def test_marker_lookalikes_are_paragraphs(line):
    assert classify_line(line).category is Category.PARAGRAPH


def test_precedence_numbered_beats_placeholder_payload():
    # Not a bare placeholder, so the numbered rule wins.
    assert classify_line("1. [[img:1]]") == Unit(Category.NUMBERED, "[[img:1]]")


def test_precedence_heading_beats_bullet():
    assert classify_line("## - not a list") == Unit(Category.HEADING, "- not a list")


# =============================================================================
# Blank and invisible lines
# =============================================================================

@pytest.mark.parametrize("line", ["", "   ", "\t", "\u200b", "\ufeff  \u200b"])
def test_blank_lines_yield_nothing(line):
    assert classify_line(line) is None


def test_clean_text_strips_zero_width_characters():
    assert clean_text("\u200bHello\u2060 world\ufeff ") == "Hello world"


def test_clean_text_keeps_joiners():
    assert clean_text("\U0001f469\u200d\U0001f4bb") == "\U0001f469\u200d\U0001f4bb"
    assert clean_text("\u0645\u06cc\u200c\u062e\u0648\u0627\u0647\u0645") == "\u0645\u06cc\u200c\u062e\u0648\u0627\u0647\u0645"


@pytest.mark.parametrize("line", ["\u0663. item", "\uff11. item"])
def test_non_ascii_digits_do_not_number(line):
    assert classify_line(line).category is Category.PARAGRAPH


# =============================================================================
# Blocks
# =============================================================================

@pytest.mark.parametrize("kind", ["heading", "heading-one", "headingTwo"])
def test_heading_kinds(kind):
    block = ContentBlock(kind=kind, text=["Section"])
    assert classify_block(block) == Unit(Category.HEADING, "Section")


def test_heading_kind_with_marker_text_strips_marker():
    block = ContentBlock(kind="heading", text=["## Section"])
    assert classify_block(block) == Unit(Category.HEADING, "Section")


def test_paragraph_block_with_marker_text_is_heading():
    block = ContentBlock(kind="paragraph", text=["## Section"])
    assert classify_block(block) == Unit(Category.HEADING, "Section")


def test_unknown_kind_is_paragraph():
    block = ContentBlock(kind="quote", text=["Wise words"])
    assert classify_block(block) == Unit(Category.PARAGRAPH, "Wise words")


def test_block_runs_are_concatenated():
    block = ContentBlock(text=["- first ", "part"])
    assert classify_block(block) == Unit(Category.BULLET, "first part")


def test_placeholder_beats_heading_kind():
    block = ContentBlock(kind="heading", text=["[[img:2]]"])
    assert classify_block(block) == Unit(Category.IMAGE, image_index=2)


def test_invisible_only_block_is_discarded():
    assert classify_block(ContentBlock(text=["\u200b", "\ufeff"])) is None


# =============================================================================
# iter_units
# =============================================================================

def test_iter_units_skips_blank_lines_and_keeps_order():
    content = TextContent(text="First\n\n  \n## Second\r\n- third\n")
    assert list(iter_units(content)) == [
        Unit(Category.PARAGRAPH, "First"),
        Unit(Category.HEADING, "Second"),
        Unit(Category.BULLET, "third"),
    ]
