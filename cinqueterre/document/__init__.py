"""Documents de page : schéma + chargement."""
from .schema import PageDocument, PageMetadata, Seo
from .loader import ContentError, PageRef, read_json, load_document, discover_pages, resolve_route

__all__ = [
    "PageDocument",
    "PageMetadata",
    "Seo",
    "ContentError",
    "PageRef",
    "read_json",
    "load_document",
    "discover_pages",
    "resolve_route",
]
