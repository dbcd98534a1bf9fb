"""
Content rendering interfaces and implementations.

This module provides pluggable and interchangeable renderers that turn
formatted content into documents.
"""

from .base import ContentRenderer
from .docx_renderer import DocxContentRenderer
from .docx_template_renderer import DocxTemplateContentRenderer
from .text_renderer import PlainTextContentRenderer, content_to_text
from .renderer_registry import (
    get_renderer,
    list_renderers,
    register_renderer,
    unregister_renderer,
)

register_renderer("docx", DocxContentRenderer)
register_renderer("docx-template", DocxTemplateContentRenderer)
register_renderer("text", PlainTextContentRenderer)

__all__ = [
    "ContentRenderer",
    "DocxContentRenderer",
    "DocxTemplateContentRenderer",
    "PlainTextContentRenderer",
    "content_to_text",
    "get_renderer",
    "list_renderers",
    "register_renderer",
    "unregister_renderer",
]
