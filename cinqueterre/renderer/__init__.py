"""Renderer HTML : sections, texte riche, gabarit de page."""
from .base import RenderContext, RenderMode, classify, SECTION_PRIORITY
from .html import render_section, render_sections, render_placeholder
from .rich_text import render_items
from .page import assemble_page, render_subnav, render_header, page_title

__all__ = [
    "RenderContext",
    "RenderMode",
    "classify",
    "SECTION_PRIORITY",
    "render_section",
    "render_sections",
    "render_placeholder",
    "render_items",
    "assemble_page",
    "render_subnav",
    "render_header",
    "page_title",
]
