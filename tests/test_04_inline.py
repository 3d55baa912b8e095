"""
Tests for inline formatting: highlight, bold and italic spans.

The formatter is tested directly; a few cases go through render_article()
to confirm headings and list items are formatted too.
"""
from __future__ import annotations

import pytest

from newsroom.schemas import BoldSpan, HighlightSpan, ItalicSpan, PlainSpan
from newsroom.services.inline import format_emphasis, format_inline, plain_text
from newsroom.services.renderer import render_article


# ── Emphasis pass ─────────────────────────────────────────────────────────────

def test_plain_text_is_one_span():
    assert format_emphasis("hello world") == [PlainSpan(text="hello world")]


def test_bold():
    assert format_emphasis("a **b** c") == [
        PlainSpan(text="a "), BoldSpan(text="b"), PlainSpan(text=" c"),
    ]


def test_italic():
    assert format_emphasis("*x*") == [ItalicSpan(text="x")]


def test_bold_and_italic_mixed():
    assert format_emphasis("**B** and *i*") == [
        BoldSpan(text="B"), PlainSpan(text=" and "), ItalicSpan(text="i"),
    ]


def test_adjacent_markers():
    assert format_emphasis("**a***b*") == [BoldSpan(text="a"), ItalicSpan(text="b")]


@pytest.mark.parametrize("text", ["**unterminated", "*open", "a * b", "2 * 3 = 6", "***", "**"])
def test_unmatched_markers_stay_literal(text):
    assert format_emphasis(text) == [PlainSpan(text=text)]


def test_empty_string_gives_no_spans():
    assert format_emphasis("") == []


# ── Highlight pass ────────────────────────────────────────────────────────────

def test_highlight_wraps_bold():
    assert format_inline("==**bold and highlighted**==") == [
        HighlightSpan(spans=[BoldSpan(text="bold and highlighted")]),
    ]


def test_highlight_strips_one_inner_space():
    assert format_inline("==  padded  ==") == [HighlightSpan(spans=[PlainSpan(text=" padded ")])]


def test_highlight_between_plain_text():
    assert format_inline("before ==mid== after") == [
        PlainSpan(text="before "),
        HighlightSpan(spans=[PlainSpan(text="mid")]),
        PlainSpan(text=" after"),
    ]


def test_highlight_is_non_greedy():
    spans = format_inline("==a== x ==b==")
    assert [s.type for s in spans] == ["highlight", "plain", "highlight"]


def test_unterminated_highlight_is_literal():
    assert format_inline("==open") == [PlainSpan(text="==open")]


def test_unterminated_bold_inside_highlight_is_literal():
    assert format_inline("==**text==") == [HighlightSpan(spans=[PlainSpan(text="**text")])]


def test_empty_highlight_is_dropped():
    assert format_inline("a ==== b") == [PlainSpan(text="a "), PlainSpan(text=" b")]


def test_bold_outside_and_inside_highlight():
    spans = format_inline("**x** ==*y*==")
    assert spans == [
        BoldSpan(text="x"),
        PlainSpan(text=" "),
        HighlightSpan(spans=[ItalicSpan(text="y")]),
    ]


def test_no_delimiters_survive():
    spans = format_inline("==**a**== *b* **c**")
    assert "*" not in plain_text(spans)
    assert "=" not in plain_text(spans)
    assert plain_text(spans) == "a b c"


# ── Through the renderer ──────────────────────────────────────────────────────

def test_heading_is_inline_formatted():
    heading = render_article("## A *fine* day").document[0]
    assert heading.spans == [PlainSpan(text="A "), ItalicSpan(text="fine"), PlainSpan(text=" day")]


def test_numbered_item_is_inline_formatted():
    items = render_article("1. ==hot== take").document[0].items
    assert items == [[HighlightSpan(spans=[PlainSpan(text="hot")]), PlainSpan(text=" take")]]

def test_emoji_joiner_survives_rendering():
    text = "Dev \U0001f469\u200d\U0001f4bb here"
    assert render_article(text).document[0].spans == [PlainSpan(text=text)]


def test_non_joiner_survives_rendering():
    word = "\u0645\u06cc\u200c\u062e\u0648\u0627\u0647\u0645"
    assert plain_text(render_article(word).document[0].spans) == word
