"""Populator FR : templates par type de page + remplissage des documents vides."""
from .templates import TEMPLATES, PageTemplate, footer_block
from .populator import (
    PopulateReport,
    PopulateResult,
    build_body,
    build_generic_body,
    find_empty_pages,
    populate_page,
    populate_tree,
    utc_timestamp,
)

__all__ = [
    "TEMPLATES",
    "PageTemplate",
    "footer_block",
    "PopulateReport",
    "PopulateResult",
    "build_body",
    "build_generic_body",
    "find_empty_pages",
    "populate_page",
    "populate_tree",
    "utc_timestamp",
]
