#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Gallery service — resolve ``[[img:N]]`` placeholders and collect leftovers.

Gallery positions are 1-based everywhere outside this module's list lookups.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from pydantic import ValidationError

from newsroom.schemas import GalleryImage, ImageFigure

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

_COURTESY_PREFIX_RE = re.compile(r"^Courtesy:\s*", re.IGNORECASE)


def courtesy_text(caption: Optional[str]) -> str:
    """Return the attribution for *caption* with one ``Courtesy:`` prefix removed.

    Always a string.  An empty result means "no attribution", which callers
    render as a placeholder dash rather than omitting the line.
    """
    return _COURTESY_PREFIX_RE.sub("", (caption or "").strip(), count=1)


# -----------------------------------------------------------------------------

def coerce_gallery(items: Optional[Iterable[Any]]) -> list[GalleryImage]:
    """Normalise caller-supplied gallery items to ``GalleryImage`` models.

    Dicts are validated leniently; entries that cannot be read as an image
    keep their slot as an empty image so later positions do not shift.
    Anything that is not a sequence of items (a number, a string, a single
    dict) is logged and treated as an empty gallery.
    """
    if not items:
        return []
    if not isinstance(items, Iterable) or isinstance(items, (str, bytes, Mapping)):
        log.warning("Unsupported gallery type %s; treating as empty", type(items).__name__)
        return []
    gallery: list[GalleryImage] = []
    for position, item in enumerate(items, 1):
        if isinstance(item, GalleryImage):
            gallery.append(item)
            continue
        try:
            gallery.append(GalleryImage.model_validate(item))
        except ValidationError:
            log.debug("Gallery item %d is not an image record; keeping an empty slot", position)
            gallery.append(GalleryImage())
    return gallery


# -----------------------------------------------------------------------------

def resolve_image(
    index: int,
    gallery: Sequence[GalleryImage],
    used: set[int],
) -> ImageFigure | None:
    """Resolve 1-based *index* against *gallery*.

    Returns ``None`` (and leaves *used* untouched) for indices that are
    non-positive or past the end of the gallery.
    """
    if index <= 0 or index > len(gallery):
        log.debug("Dropping image placeholder %d: gallery has %d image(s)", index, len(gallery))
        return None

    image = gallery[index - 1]
    used.add(index)
    return ImageFigure(image=image, index=index, courtesy=courtesy_text(image.caption))


# -----------------------------------------------------------------------------

def collect_leftovers(gallery: Sequence[GalleryImage], used: set[int]) -> list[GalleryImage]:
    """Gallery images never embedded in the body, in gallery order."""
    return [img for i, img in enumerate(gallery) if (i + 1) not in used]
