#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Article renderer
================
Renders an article body plus its image gallery to a document-node tree.

Pipeline (pure, synchronous, one call per article render):

  detect_content()    — text mode (str) or block mode (list of CMS blocks)
  iter_units()        — classify each line/block
  group_units()       — fold runs of list items into list nodes, resolve
                        [[img:N]] placeholders in place, format inline text
  collect_leftovers() — gallery images no placeholder referenced

Nothing here raises on bad content; malformed input degrades to omission.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from newsroom.schemas import (
    BulletList, DocumentNode, GalleryImage, Heading, NumberedList,
    Paragraph, RenderResult,
)
from newsroom.services.content import (
    Category, Unit, detect_content, iter_units, list_item_text,
)
from newsroom.services.gallery import coerce_gallery, collect_leftovers, resolve_image
from newsroom.services.inline import format_inline

log = logging.getLogger(__name__)


# Bump whenever the node tree produced for the same input changes, so callers
# caching rendered output can discard stale entries.
RENDERER_VERSION = 2


# -----------------------------------------------------------------------------
# Grouping
# -----------------------------------------------------------------------------

_LIST_NODES = {
    Category.BULLET:   BulletList,
    Category.NUMBERED: NumberedList,
}


def group_units(
    units: Iterable[Unit],
    gallery: Sequence[GalleryImage],
    used: set[int],
) -> list[DocumentNode]:
    """Fold classified *units* into document nodes.

    A list unit opens a run that absorbs every following unit whose cleaned
    text re-matches the same list marker; the first unit that does not,
    including one of the other list category, closes the run.
    Image placeholders resolve in place and record their index in *used*.
    """
    units = list(units)
    nodes: list[DocumentNode] = []
    i = 0
    while i < len(units):
        unit = units[i]

        if unit.category in _LIST_NODES:
            items = [format_inline(unit.text)]
            i += 1
            while i < len(units):
                text = list_item_text(units[i], unit.category)
                if text is None:
                    break
                items.append(format_inline(text))
                i += 1
            nodes.append(_LIST_NODES[unit.category](items=items))
            continue

        if unit.category is Category.IMAGE:
            figure = resolve_image(unit.image_index, gallery, used)
            if figure is not None:
                nodes.append(figure)
        elif unit.category is Category.HEADING:
            nodes.append(Heading(spans=format_inline(unit.text)))
        else:
            nodes.append(Paragraph(spans=format_inline(unit.text)))
        i += 1

    return nodes


# -----------------------------------------------------------------------------
# Public render function
# -----------------------------------------------------------------------------

def render_article(
    content: Any,
    gallery: Optional[Iterable[Any]] = None,
) -> RenderResult:
    """
    Render an article body to a ``RenderResult``.

    Parameters
    ----------
    content : micro-markup string, list of CMS content blocks, or None
    gallery : ordered gallery images (``GalleryImage`` or url/alt/caption
              dicts); ``[[img:N]]`` refers to the N-th entry, counting from 1

    The result's ``leftover`` lists the gallery images no placeholder used,
    in gallery order, for a trailing "more photos" section.
    """
    images = coerce_gallery(gallery)
    used: set[int] = set()

    detected = detect_content(content)
    document = group_units(iter_units(detected), images, used) if detected is not None else []
    leftover = collect_leftovers(images, used)

    log.debug(
        "Rendered %d node(s); %d of %d gallery image(s) embedded",
        len(document), len(used), len(images),
    )
    return RenderResult(document=document, used_image_indices=used, leftover=leftover)
