"""
cinqueterre : générateur statique du site Cinqueterre.travel.

Usage :
    from cinqueterre import Settings, build_site
    report = build_site(Settings.for_root("."))
"""
__version__ = "0.3.0"

from .config import Settings
from .core.theme import Theme, load_theme
from .document import PageDocument, ContentError, load_document, discover_pages
from .renderer import RenderMode, RenderContext, assemble_page, render_section
from .builder import BuildReport, build_site

__all__ = [
    "__version__",
    "Settings",
    "Theme",
    "load_theme",
    "PageDocument",
    "ContentError",
    "load_document",
    "discover_pages",
    "RenderMode",
    "RenderContext",
    "assemble_page",
    "render_section",
    "BuildReport",
    "build_site",
]
