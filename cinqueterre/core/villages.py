"""Registre des villages + catégories de sous-pages (navigation uniquement)."""
from typing import List, NamedTuple, Optional

VILLAGES = ("monterosso", "vernazza", "corniglia", "manarola", "riomaggiore")

REGION = "cinque-terre"


class SubPage(NamedTuple):
    slug: str
    label: str


VILLAGE_SUBPAGES: List[SubPage] = [
    SubPage("overview", "Overview"),
    SubPage("restaurants", "Restaurants"),
    SubPage("hotels", "Hotels"),
    SubPage("hiking", "Hiking"),
    SubPage("beaches", "Beaches"),
    SubPage("sights", "Sights"),
    SubPage("events", "Events"),
    SubPage("getting-here", "Getting Here"),
    SubPage("weather", "Weather"),
    SubPage("faq", "FAQ"),
]


def village_from_route(route: str) -> Optional[str]:
    """Village ciblé par la route ("monterosso/hiking" → "monterosso"), sinon None."""
    head = (route or "").split("/", 1)[0]
    return head if head in VILLAGES else None


def subpage_from_route(route: str) -> str:
    """Second segment de la route ("" pour la racine du village)."""
    parts = (route or "").split("/")
    return parts[1] if len(parts) > 1 else ""


def display_name(village: str) -> str:
    """"monterosso" → "Monterosso" (seule la première lettre change)."""
    return village[:1].upper() + village[1:]
