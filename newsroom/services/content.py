#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Content service — mode detection and line/block classification.

An article body arrives from the CMS either as a single micro-markup string
(*text mode*) or as an array of block dicts (*block mode*).  Both are reduced
to the same stream of classified ``Unit`` values for the grouping pass.

Supported line syntax
---------------------
[[img:N]]          — image placeholder, N is a 1-based gallery position
## Heading          — heading
- item  /  * item  — bullet list item
1. item            — numbered list item (ASCII digits)
anything else      — paragraph
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from newsroom.schemas import BlockContent, ContentBlock, TextContent

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Mode detection
# -----------------------------------------------------------------------------

def detect_content(raw: Any) -> TextContent | BlockContent | None:
    """Wrap *raw* in its tagged content variant, or return None when empty.

    Unsupported shapes are logged and treated as empty rather than rejected.
    """
    if raw is None:
        return None
    if isinstance(raw, (TextContent, BlockContent)):
        return raw
    if isinstance(raw, str):
        return TextContent(text=raw) if raw else None
    if isinstance(raw, (list, tuple)):
        if not raw:
            return None
        return BlockContent(blocks=[ContentBlock.from_raw(b) for b in raw])
    log.warning("Unsupported content type %s; rendering an empty document", type(raw).__name__)
    return None


# -----------------------------------------------------------------------------
# Units
# -----------------------------------------------------------------------------

class Category(enum.Enum):
    IMAGE     = "image"
    HEADING   = "heading"
    BULLET    = "bullet"
    NUMBERED  = "numbered"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Unit:
    category: Category
    text: str = ""          # payload with any block marker stripped
    image_index: int = 0    # 1-based, IMAGE units only
    # cleaned text before any marker was stripped
    source: str = field(default="", compare=False)


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

_IMG_PLACEHOLDER_RE = re.compile(r"^\[\[\s*img\s*:\s*([0-9]+)\s*\]\]$", re.IGNORECASE)
_HEADING_MARKER_RE  = re.compile(r"^##\s+")
_BULLET_RE          = re.compile(r"^[-*]\s+(.+)$")
_NUMBERED_RE        = re.compile(r"^[0-9]+\.\s+(.+)$")

_LIST_ITEM_RES = {
    Category.BULLET:   _BULLET_RE,
    Category.NUMBERED: _NUMBERED_RE,
}

# Zero-width space, word joiner, BOM.  ZWJ and ZWNJ are content and stay.
_INVISIBLE_RE = re.compile("[\u200b\u2060\ufeff]")

HEADING_KINDS = frozenset({"heading", "heading-one", "headingTwo"})


def clean_text(text: str) -> str:
    return _INVISIBLE_RE.sub("", text).strip()


def _classify(text: str, heading_kind: bool = False) -> Unit:
    m = _IMG_PLACEHOLDER_RE.match(text)
    if m:
        return Unit(Category.IMAGE, image_index=int(m.group(1)), source=text)

    if text.startswith("## "):
        return Unit(Category.HEADING, _HEADING_MARKER_RE.sub("", text, count=1), source=text)
    if heading_kind:
        return Unit(Category.HEADING, text, source=text)

    for category, pattern in _LIST_ITEM_RES.items():
        m = pattern.match(text)
        if m:
            return Unit(category, m.group(1), source=text)

    return Unit(Category.PARAGRAPH, text, source=text)


def list_item_text(unit: Unit, category: Category) -> str | None:
    """Re-match *unit*'s cleaned text as an item of list *category*.

    Block kinds are ignored here: a heading block reading ``- b`` still
    continues a bullet run.
    """
    m = _LIST_ITEM_RES[category].match(unit.source)
    return m.group(1) if m else None


def classify_line(line: str) -> Unit | None:
    """Classify one text-mode line; blank (or invisible-only) lines yield None."""
    text = clean_text(line)
    if not text:
        return None
    return _classify(text)


def classify_block(block: ContentBlock) -> Unit | None:
    """Classify one block; a heading ``kind`` counts the same as a ``## `` marker."""
    text = clean_text(block.joined)
    if not text:
        return None
    return _classify(text, heading_kind=block.kind in HEADING_KINDS)


# -----------------------------------------------------------------------------

def iter_units(content: TextContent | BlockContent) -> Iterator[Unit]:
    """Yield classified units in document order, skipping empty ones."""
    if isinstance(content, TextContent):
        raw_units = (classify_line(line) for line in content.text.split("\n"))
    else:
        raw_units = (classify_block(block) for block in content.blocks)
    for unit in raw_units:
        if unit is not None:
            yield unit
