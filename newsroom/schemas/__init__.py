from newsroom.schemas.schemas import (
    GalleryImage,
    ContentBlock, TextContent, BlockContent, RawContent,
    PlainSpan, BoldSpan, ItalicSpan, HighlightSpan, InlineSpan,
    Paragraph, Heading, BulletList, NumberedList, ImageFigure, DocumentNode,
    RenderResult,
    RenderRequest, RenderResponse, PreviewResponse,
)

__all__ = [
    "GalleryImage",
    "ContentBlock", "TextContent", "BlockContent", "RawContent",
    "PlainSpan", "BoldSpan", "ItalicSpan", "HighlightSpan", "InlineSpan",
    "Paragraph", "Heading", "BulletList", "NumberedList", "ImageFigure", "DocumentNode",
    "RenderResult",
    "RenderRequest", "RenderResponse", "PreviewResponse",
]
