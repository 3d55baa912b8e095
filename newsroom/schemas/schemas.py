#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for the article rendering engine and its HTTP surface.

Document nodes and inline spans are discriminated unions keyed on ``type``;
raw article bodies are a discriminated union keyed on ``mode``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_serializer, field_validator


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Gallery
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class GalleryImage(BaseModel):
    url: str = ""
    alt: str = ""
    caption: str = ""

    @field_validator("url", "alt", "caption", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Raw content
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _collect_text(node: Any) -> str:
    """Depth-first concatenation of inline text runs (links nest their runs)."""
    if not isinstance(node, Mapping):
        return ""
    children = node.get("children")
    if isinstance(children, list):
        return "".join(_collect_text(c) for c in children)
    text = node.get("text")
    return "" if text is None else str(text)


class ContentBlock(BaseModel):
    kind: str = "paragraph"
    text: list[str] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Any) -> ContentBlock:
        """Build a block from a CMS block dict without ever raising.

        Accepts ``{"type": ..., "children": [{"text": ...}, ...]}`` as well as
        the flatter ``{"kind": ..., "text": ...}`` shape.  Anything else turns
        into an empty paragraph, which the classifier discards.
        """
        if isinstance(raw, ContentBlock):
            return raw
        if not isinstance(raw, Mapping):
            return cls()

        kind = raw.get("type", raw.get("kind"))
        if not isinstance(kind, str) or not kind:
            kind = "paragraph"

        children = raw.get("children")
        text = raw.get("text")
        if isinstance(children, list):
            runs = [_collect_text(c) for c in children]
        elif isinstance(text, list):
            runs = ["" if t is None else str(t) for t in text]
        elif text is not None:
            runs = [str(text)]
        else:
            runs = []
        return cls(kind=kind, text=runs)

    @property
    def joined(self) -> str:
        return "".join(self.text)


# -----------------------------------------------------------------------------

class TextContent(BaseModel):
    mode: Literal["text"] = "text"
    text: str


class BlockContent(BaseModel):
    mode: Literal["blocks"] = "blocks"
    blocks: list[ContentBlock]


RawContent = Annotated[Union[TextContent, BlockContent], Field(discriminator="mode")]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Inline spans
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PlainSpan(BaseModel):
    type: Literal["plain"] = "plain"
    text: str


class BoldSpan(BaseModel):
    type: Literal["bold"] = "bold"
    text: str


class ItalicSpan(BaseModel):
    type: Literal["italic"] = "italic"
    text: str


class HighlightSpan(BaseModel):
    type: Literal["highlight"] = "highlight"
    spans: list[InlineSpan]


InlineSpan = Annotated[
    Union[PlainSpan, BoldSpan, ItalicSpan, HighlightSpan],
    Field(discriminator="type"),
]

HighlightSpan.model_rebuild()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Document nodes
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Paragraph(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    spans: list[InlineSpan]


class Heading(BaseModel):
    type: Literal["heading"] = "heading"
    spans: list[InlineSpan]


class BulletList(BaseModel):
    type: Literal["bullet_list"] = "bullet_list"
    items: list[list[InlineSpan]]


class NumberedList(BaseModel):
    type: Literal["numbered_list"] = "numbered_list"
    items: list[list[InlineSpan]]


class ImageFigure(BaseModel):
    type: Literal["image"] = "image"
    image: GalleryImage
    index: int        # 1-based gallery position
    courtesy: str = ""


DocumentNode = Annotated[
    Union[Paragraph, Heading, BulletList, NumberedList, ImageFigure],
    Field(discriminator="type"),
]


# -----------------------------------------------------------------------------

class RenderResult(BaseModel):
    document: list[DocumentNode] = Field(default_factory=list)
    used_image_indices: set[int] = Field(default_factory=set)
    leftover: list[GalleryImage] = Field(default_factory=list)

    @field_serializer("used_image_indices")
    def serialize_used(self, v: set[int]) -> list[int]:
        return sorted(v)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# HTTP
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RenderRequest(BaseModel):
    content: Any = None   # str, list of CMS blocks, or null
    gallery: list[GalleryImage] = Field(default_factory=list)
    include_html: bool = False


# -----------------------------------------------------------------------------

class RenderResponse(BaseModel):
    document: list[DocumentNode]
    used_image_indices: list[int]
    leftover: list[GalleryImage]
    html: Optional[str] = None
    renderer_version: int


# -----------------------------------------------------------------------------

class PreviewResponse(BaseModel):
    html: str
    node_count: int
