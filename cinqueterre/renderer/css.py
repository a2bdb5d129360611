"""
Feuille de style de base du gabarit de page (reset, responsive, bandeau preview).

Les sections portent leurs styles inline ; ici uniquement ce qui ne peut pas
l'être : reset, media queries qui replient les grilles, scrollbar de la subnav.
"""
from urllib.parse import quote

from ..core.theme import Theme

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2"


def google_fonts_href(theme: Theme) -> str:
    """Lien Google Fonts pour la police display + la police sans du thème."""
    display = quote(theme.display_font_family, safe="")
    sans = quote(theme.sans_font_family, safe="")
    return (
        f"{GOOGLE_FONTS_URL}?family={display}:wght@400;500;600;700"
        f"&family={sans}:wght@400;500;600;700&display=swap"
    )


def base_stylesheet(theme: Theme) -> str:
    t = theme
    return f"""
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{ font-family: {t.font_sans}; line-height: 1.6; color: {t.foreground}; background: {t.background}; }}
    img {{ max-width: 100%; height: auto; }}
    a {{ transition: all 0.2s; }}
    a:hover {{ opacity: 0.85; }}
    .subnav::-webkit-scrollbar {{ height: 4px; }}
    .subnav::-webkit-scrollbar-track {{ background: {t.cream}; }}
    .subnav::-webkit-scrollbar-thumb {{ background: {t.border}; border-radius: 2px; }}
    @media (max-width: 768px) {{
      [style*="grid-template-columns:repeat(4"] {{ grid-template-columns: repeat(2, 1fr) !important; }}
      [style*="grid-template-columns:repeat(3"] {{ grid-template-columns: repeat(1, 1fr) !important; }}
      [style*="grid-template-columns:1fr 1fr"] {{ grid-template-columns: 1fr !important; }}
      h1 {{ font-size: 2rem !important; }}
      h2 {{ font-size: 1.5rem !important; }}
      .main-nav {{ display: none !important; }}
    }}"""


def preview_stylesheet() -> str:
    return """
    .preview-banner {
      position: fixed; top: 0; left: 0; right: 0; z-index: 1000;
      background: #f59e0b; color: #78350f;
      padding: 0.5rem 1rem; text-align: center; font-size: 0.875rem; font-weight: 500;
    }
    .preview-banner a { color: inherit; margin-left: 1rem; }
    body { padding-top: 2.5rem; }
    header { top: 2.5rem !important; }"""
