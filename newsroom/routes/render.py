#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoints.

POST /api/v1/render                      — render an article body + gallery
GET  /api/v1/render/preview?content=...  — live preview for the editor
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from newsroom.core.config import Settings, get_settings
from newsroom.schemas import PreviewResponse, RenderRequest, RenderResponse, RenderResult
from newsroom.services.html_writer import render_html
from newsroom.services.renderer import RENDERER_VERSION, render_article


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# -----------------------------------------------------------------------------

def _html(result: RenderResult, settings: Settings) -> str:
    return render_html(
        result,
        courtesy_label=settings.courtesy_label,
        courtesy_placeholder=settings.courtesy_placeholder,
        more_photos_title=settings.more_photos_title,
    )


# -----------------------------------------------------------------------------

@router.post("", response_model=RenderResponse)
async def render_body(body: RenderRequest):
    """Render CMS article content against its gallery."""
    settings = get_settings()
    if isinstance(body.content, str) and len(body.content) > settings.max_content_length:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Content exceeds maximum length of {settings.max_content_length} characters",
        )

    result = render_article(body.content, body.gallery)
    return RenderResponse(
        document=result.document,
        used_image_indices=sorted(result.used_image_indices),
        leftover=result.leftover,
        html=_html(result, settings) if body.include_html else None,
        renderer_version=RENDERER_VERSION,
    )


# -----------------------------------------------------------------------------

@router.get("/preview", response_model=PreviewResponse)
async def render_preview(
    content: str = Query(default="", max_length=1_000_000),
):
    """Return rendered HTML for a snippet of micro-markup — used by the live editor preview."""
    settings = get_settings()
    result = render_article(content)
    return PreviewResponse(html=_html(result, settings), node_count=len(result.document))


# -----------------------------------------------------------------------------
