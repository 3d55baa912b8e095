#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
HTML writer
===========
Serialises a ``RenderResult`` to an HTML fragment for the article page.

Image figures always carry a courtesy line; an empty courtesy renders the
placeholder dash.  Leftover gallery images go into a trailing
``<section class="more-photos">``, emitted only when there are any.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
import re

from newsroom.schemas import (
    BoldSpan, BulletList, DocumentNode, GalleryImage, Heading, HighlightSpan,
    ImageFigure, InlineSpan, ItalicSpan, NumberedList, Paragraph, RenderResult,
)
from newsroom.services.gallery import courtesy_text
from newsroom.services.inline import plain_text


# -----------------------------------------------------------------------------
# Inline spans
# -----------------------------------------------------------------------------

def _spans(spans: list[InlineSpan]) -> str:
    out: list[str] = []
    for span in spans:
        if isinstance(span, HighlightSpan):
            out.append(f"<mark>{_spans(span.spans)}</mark>")
        elif isinstance(span, BoldSpan):
            out.append(f"<strong>{html.escape(span.text)}</strong>")
        elif isinstance(span, ItalicSpan):
            out.append(f"<em>{html.escape(span.text)}</em>")
        else:
            out.append(html.escape(span.text))
    return "".join(out)


# -----------------------------------------------------------------------------
# Heading anchors
# -----------------------------------------------------------------------------

def _slugify_anchor(text: str) -> str:
    """Convert heading text to a URL-safe anchor ID."""
    text = text.strip().lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    text = re.sub(r'-+', '-', text)
    return text.strip('-') or 'section'


class _Anchors:
    """Hands out unique anchor IDs: ``intro``, ``intro-1``, ``intro-2`` …"""

    def __init__(self) -> None:
        self._used: dict[str, int] = {}

    def __call__(self, text: str) -> str:
        base = _slugify_anchor(text)
        count = self._used.get(base, 0)
        self._used[base] = count + 1
        return base if count == 0 else f'{base}-{count}'


# -----------------------------------------------------------------------------
# Figures
# -----------------------------------------------------------------------------

def _figure(
    image: GalleryImage,
    courtesy: str,
    alt_fallback: str,
    css_class: str,
    courtesy_label: str,
    courtesy_placeholder: str,
) -> str:
    src  = html.escape(image.url, quote=True)
    alt  = html.escape(image.alt or alt_fallback, quote=True)
    line = html.escape(courtesy) if courtesy else html.escape(courtesy_placeholder)
    return (
        f'<figure class="{css_class}">'
        f'<img src="{src}" alt="{alt}" loading="lazy" />'
        f'<figcaption><span class="courtesy-label">{html.escape(courtesy_label)}</span> {line}</figcaption>'
        f'</figure>'
    )


# -----------------------------------------------------------------------------
# Nodes
# -----------------------------------------------------------------------------

def _node(node: DocumentNode, anchors: _Anchors, courtesy_label: str, courtesy_placeholder: str) -> str:
    if isinstance(node, Paragraph):
        return f"<p>{_spans(node.spans)}</p>"
    if isinstance(node, Heading):
        anchor = anchors(plain_text(node.spans))
        return f'<h2 class="article-subhead" id="{anchor}">{_spans(node.spans)}</h2>'
    if isinstance(node, (BulletList, NumberedList)):
        tag   = "ul" if isinstance(node, BulletList) else "ol"
        items = "".join(f"<li>{_spans(item)}</li>" for item in node.items)
        return f"<{tag}>{items}</{tag}>"
    if isinstance(node, ImageFigure):
        return _figure(node.image, node.courtesy, "Article image", "article-figure",
                       courtesy_label, courtesy_placeholder)
    raise TypeError(f"Unknown document node: {type(node).__name__}")


def _leftover_positions(result: RenderResult) -> list[int]:
    # Every used index is a valid gallery position, so the gallery length is
    # recoverable from the result alone.
    total = len(result.leftover) + len(result.used_image_indices)
    return [p for p in range(1, total + 1) if p not in result.used_image_indices]


# -----------------------------------------------------------------------------
# Public render function
# -----------------------------------------------------------------------------

def render_html(
    result: RenderResult,
    *,
    courtesy_label: str = "Courtesy:",
    courtesy_placeholder: str = "—",
    more_photos_title: str = "More photos",
) -> str:
    """
    Render *result* to HTML.

    Parameters
    ----------
    result               : output of ``render_article()``
    courtesy_label       : text shown before every image attribution
    courtesy_placeholder : shown in place of an empty attribution
    more_photos_title    : heading of the leftover-images section
    """
    anchors = _Anchors()
    body = "\n".join(
        _node(n, anchors, courtesy_label, courtesy_placeholder) for n in result.document
    )
    out = [f'<div class="article-body">\n{body}\n</div>' if body else '<div class="article-body"></div>']

    if result.leftover:
        figures = "\n".join(
            _figure(img, courtesy_text(img.caption), f"Photo {pos}", "more-photos-figure",
                    courtesy_label, courtesy_placeholder)
            for img, pos in zip(result.leftover, _leftover_positions(result))
        )
        out.append(
            f'<section class="more-photos">'
            f'<h2>{html.escape(more_photos_title)}</h2>\n{figures}\n</section>'
        )

    return "\n".join(out)
