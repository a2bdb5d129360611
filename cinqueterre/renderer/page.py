"""
Gabarit de page : <head>, header + nav, sous-navigation village, <main>, footer.

assemble_page(document, route, ...) ne lève jamais : body absent → <main> vide,
champ absent → valeur par défaut.
"""
from typing import List, Optional, Tuple

from ..core.i18n import escape, locale_from_route
from ..core.theme import Theme
from ..core.villages import (
    VILLAGES,
    VILLAGE_SUBPAGES,
    REGION,
    display_name,
    subpage_from_route,
    village_from_route,
)
from ..document.schema import PageDocument
from .base import RenderContext, RenderMode
from .css import base_stylesheet, google_fonts_href, preview_stylesheet
from .html import render_sections

DEFAULT_SITE_NAME = "Cinqueterre.travel"
DEFAULT_SITE_URL = "https://cinqueterre.travel"
TAGLINE = "Your Complete Guide to Italy's Coastal Paradise"
COPYRIGHT = "© 2025 Cinqueterre.travel · Built with swarm.press"

# (href, label, village ciblé ou None)
NavLink = Tuple[str, str, Optional[str]]

PRIMARY_NAV: List[NavLink] = (
    [(f"/{REGION}", "Cinque Terre", None)]
    + [(f"/{v}", display_name(v), v) for v in VILLAGES]
)
SECONDARY_NAV: List[NavLink] = [
    (f"/{REGION}/hiking", "Hiking", None),
    (f"/{REGION}/restaurants", "Restaurants", None),
]

FOOTER_COLUMNS: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("Villages", [(f"/{v}", display_name(v)) for v in VILLAGES]),
    ("Plan Your Trip", [
        (f"/{REGION}/hotels", "Hotels"),
        (f"/{REGION}/restaurants", "Restaurants"),
        (f"/{REGION}/getting-here", "Getting Here"),
        (f"/{REGION}/weather", "Weather"),
        ("/transport", "Transport"),
    ]),
    ("Explore", [
        (f"/{REGION}/hiking", "Hiking Trails"),
        (f"/{REGION}/beaches", "Beaches"),
        (f"/{REGION}/boat-tours", "Boat Tours"),
        (f"/{REGION}/events", "Events"),
        (f"/{REGION}/sights", "Sights"),
    ]),
    ("About", [
        (f"/{REGION}", "About Cinque Terre"),
        (f"/{REGION}/overview", "Overview"),
        (f"/{REGION}/faq", "FAQ"),
        (f"/{REGION}/maps", "Maps"),
    ]),
]


# ── Navigation ──────────────────────────────────────────────────────────────

def _tab(href: str, label: str, active: bool, theme: Theme) -> str:
    color = theme.brand if active else theme.gray
    underline = theme.brand if active else "transparent"
    cls = "subnav__link subnav__link--active" if active else "subnav__link"
    current = ' aria-current="page"' if active else ""
    return (
        f'<a href="{href}" class="{cls}"{current} style="padding:0.75rem 1rem;color:{color};'
        f'text-decoration:none;font-size:0.875rem;border-bottom:2px solid {underline}">{label}</a>'
    )


def render_subnav(route: str, theme: Theme) -> str:
    """Barre d'onglets d'un village (racine + 10 catégories), "" hors village."""
    village = village_from_route(route)
    if not village:
        return ""

    current = subpage_from_route(route)
    tabs = [_tab(f"/{village}", display_name(village), not current, theme)]
    tabs += [
        _tab(f"/{village}/{sub.slug}", sub.label, current == sub.slug, theme)
        for sub in VILLAGE_SUBPAGES
    ]
    tabs_html = "".join(tabs)
    return f"""
  <nav class="subnav" style="background:{theme.cream};border-bottom:1px solid {theme.border};overflow-x:auto">
    <div style="max-width:72rem;margin:0 auto;padding:0 1.5rem;display:flex;gap:0.5rem;white-space:nowrap">
      {tabs_html}
    </div>
  </nav>"""


def _nav_link(link: NavLink, village: Optional[str], theme: Theme) -> str:
    href, label, target = link
    active = target is not None and target == village
    color = theme.brand if active else theme.gray
    cls = "main-nav__link main-nav__link--active" if active else "main-nav__link"
    current = ' aria-current="true"' if active else ""
    return (
        f'<a href="{href}" class="{cls}"{current} style="color:{color};'
        f'text-decoration:none;font-size:0.9375rem">{label}</a>'
    )


def render_header(route: str, theme: Theme, site_name: str = DEFAULT_SITE_NAME) -> str:
    village = village_from_route(route)
    primary = "\n        ".join(_nav_link(link, village, theme) for link in PRIMARY_NAV)
    secondary = "\n        ".join(_nav_link(link, village, theme) for link in SECONDARY_NAV)
    return f"""
  <header style="padding:1rem 1.5rem;background:{theme.white};border-bottom:1px solid {theme.border};position:sticky;top:0;z-index:50">
    <div style="max-width:72rem;margin:0 auto;display:flex;justify-content:space-between;align-items:center">
      <a href="/" class="logo" style="font-size:1.25rem;font-weight:600;color:{theme.navy};text-decoration:none;font-family:{theme.font_serif}">{escape(site_name)}</a>
      <nav class="main-nav" style="display:flex;gap:1.5rem;align-items:center">
        {primary}
        <span style="color:{theme.border}">|</span>
        {secondary}
      </nav>
    </div>
  </header>"""


def render_footer(theme: Theme, site_name: str = DEFAULT_SITE_NAME) -> str:
    columns = ""
    for title, links in FOOTER_COLUMNS:
        anchors = "".join(
            f'<a href="{href}" style="color:{theme.gray_light};text-decoration:none;font-size:0.875rem">{label}</a>'
            for href, label in links
        )
        columns += f"""
        <div>
          <h4 style="color:{theme.white};font-weight:600;margin-bottom:1rem;font-size:0.875rem">{title}</h4>
          <div style="display:flex;flex-direction:column;gap:0.5rem">{anchors}</div>
        </div>"""

    return f"""
  <footer style="padding:4rem 1.5rem 2rem;background:{theme.navy};border-top:1px solid {theme.border}">
    <div style="max-width:72rem;margin:0 auto">
      <div style="display:grid;grid-template-columns:repeat(4,1fr);gap:2rem;margin-bottom:3rem">{columns}
      </div>
      <div style="text-align:center;padding-top:2rem;border-top:1px solid rgba(255,255,255,0.1)">
        <p style="color:{theme.white};font-weight:500;margin-bottom:0.25rem;font-family:{theme.font_serif}">{escape(site_name)}</p>
        <p style="color:{theme.gray_light};font-size:0.875rem">{TAGLINE}</p>
        <p style="margin-top:1rem;font-size:0.75rem;color:rgba(255,255,255,0.4)">{COPYRIGHT}</p>
      </div>
    </div>
  </footer>"""


def render_preview_banner(route: str) -> str:
    return f"""
  <div class="preview-banner">
    Local Preview - {escape(route)}
    <a href="/">Home</a>
    <a href="/_pages">Pages</a>
  </div>"""


# ── Page complète ───────────────────────────────────────────────────────────

def page_title(document: PageDocument, ctx: RenderContext, site_name: str = DEFAULT_SITE_NAME) -> str:
    """Titre SEO → titre du document → nom du site."""
    return ctx.t(document.seo.title) or ctx.t(document.title) or site_name


def canonical_url(route: str, site_url: str = DEFAULT_SITE_URL) -> str:
    path = "" if route == "index" else route
    return f"{site_url.rstrip('/')}/{path}"


def assemble_page(
    document: PageDocument,
    route: str,
    theme: Optional[Theme] = None,
    mode: RenderMode = RenderMode.BUILD,
    site_name: str = DEFAULT_SITE_NAME,
    site_url: str = DEFAULT_SITE_URL,
) -> str:
    """Génère le HTML complet d'une page à partir de son document et de sa route."""
    theme = theme or Theme()
    ctx = RenderContext(theme=theme, mode=mode, locale=locale_from_route(route))

    title = escape(page_title(document, ctx, site_name))
    description = ctx.text(document.seo.description)
    css = base_stylesheet(theme)
    banner = ""
    if ctx.is_preview:
        css += preview_stylesheet()
        banner = render_preview_banner(route)

    return f"""<!DOCTYPE html>
<html lang="{ctx.locale}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <meta name="description" content="{description}">
  <link rel="canonical" href="{canonical_url(route, site_url)}">
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link href="{google_fonts_href(theme)}" rel="stylesheet">
  <style>{css}
  </style>
</head>
<body>{banner}{render_header(route, theme, site_name)}{render_subnav(route, theme)}

  <main>
    {render_sections(document.body, ctx)}
  </main>
{render_footer(theme, site_name)}
</body>
</html>"""
