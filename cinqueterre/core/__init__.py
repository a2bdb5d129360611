"""Core : i18n, thème, registre des villages."""
from .i18n import resolve, escape, expand_bold, locale_from_route, DEFAULT_LOCALE
from .theme import Theme, load_theme
from .villages import (
    VILLAGES,
    VILLAGE_SUBPAGES,
    SubPage,
    village_from_route,
    subpage_from_route,
    display_name,
)

__all__ = [
    "resolve",
    "escape",
    "expand_bold",
    "locale_from_route",
    "DEFAULT_LOCALE",
    "Theme",
    "load_theme",
    "VILLAGES",
    "VILLAGE_SUBPAGES",
    "SubPage",
    "village_from_route",
    "subpage_from_route",
    "display_name",
]
