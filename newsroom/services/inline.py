#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Inline formatter
================
Turns a run of article text into a flat sequence of inline spans.

Two independent split passes:

  ==highlighted==   outer pass; the inner text is formatted again by the
                    emphasis pass and wrapped in a ``HighlightSpan``
  **bold**          emphasis pass
  *italic*          emphasis pass

Unterminated or malformed markers are left in place as plain text.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

from newsroom.schemas import (
    BoldSpan, HighlightSpan, InlineSpan, ItalicSpan, PlainSpan,
)


# -----------------------------------------------------------------------------

# Capturing groups keep the delimited tokens in re.split() output at odd indices.
_HIGHLIGHT_RE = re.compile(r"(==.*?==)")
_EMPHASIS_RE  = re.compile(r"(\*\*[^*]+\*\*|\*[^*]+\*)")

_HIGHLIGHT_OPEN_RE  = re.compile(r"^==\s?")
_HIGHLIGHT_CLOSE_RE = re.compile(r"\s?==$")


# -----------------------------------------------------------------------------

def format_emphasis(text: str) -> list[InlineSpan]:
    """Split *text* on bold/italic markers."""
    spans: list[InlineSpan] = []
    for i, token in enumerate(_EMPHASIS_RE.split(text)):
        if not token:
            continue
        if i % 2 == 0:
            spans.append(PlainSpan(text=token))
        elif token.startswith("**"):
            spans.append(BoldSpan(text=token[2:-2]))
        else:
            spans.append(ItalicSpan(text=token[1:-1]))
    return spans


def _strip_highlight(token: str) -> str:
    token = _HIGHLIGHT_OPEN_RE.sub("", token, count=1)
    return _HIGHLIGHT_CLOSE_RE.sub("", token, count=1)


def format_inline(text: str) -> list[InlineSpan]:
    """Format *text* into spans, highlight first, then bold/italic."""
    spans: list[InlineSpan] = []
    for i, segment in enumerate(_HIGHLIGHT_RE.split(text)):
        if not segment:
            continue
        if i % 2 == 0:
            spans.extend(format_emphasis(segment))
            continue
        inner = format_emphasis(_strip_highlight(segment))
        if inner:
            spans.append(HighlightSpan(spans=inner))
    return spans


# -----------------------------------------------------------------------------

def plain_text(spans: list[InlineSpan]) -> str:
    """Return the visible text of *spans* with all formatting dropped."""
    parts: list[str] = []
    for span in spans:
        if isinstance(span, HighlightSpan):
            parts.append(plain_text(span.spans))
        else:
            parts.append(span.text)
    return "".join(parts)
