"""
Thème du site : tokens couleurs / polices / dégradés résolus depuis site.json.

Chaque token a un repli codé en dur, le rendu reste correct avec un thème
partiel ou absent. Le Theme est construit une fois puis passé aux renderers.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)

DEFAULT_HERO_GRADIENT = "linear-gradient(180deg,rgba(10,22,40,0.6) 0%,rgba(10,22,40,0.4) 100%)"
DEFAULT_CARD_GRADIENT = "linear-gradient(180deg,rgba(0,0,0,0) 0%,rgba(10,22,40,0.7) 100%)"


def _dig(data: Dict[str, Any], *path: str) -> Any:
    node: Any = data
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _first_family(stack: str) -> str:
    """"'Cormorant Garamond', Georgia, serif" → "Cormorant Garamond"."""
    return stack.split(",")[0].strip().replace("'", "").replace('"', "")


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    brand: str = "#0d9488"
    brand_hover: str = "#0f766e"
    background: str = "#ffffff"
    background_alt: str = "#fafaf9"
    surface: str = "#ffffff"
    foreground: str = "#0a1628"
    foreground_muted: str = "#64748b"
    border: str = "#e5e7eb"
    white: str = "#ffffff"
    gray_light: str = "#94a3b8"
    font_serif: str = "'Cormorant Garamond', Georgia, serif"
    font_sans: str = "'Inter', -apple-system, BlinkMacSystemFont, sans-serif"
    hero_gradient: str = DEFAULT_HERO_GRADIENT
    card_gradient: str = DEFAULT_CARD_GRADIENT

    # Alias sémantiques utilisés par les templates
    @property
    def navy(self) -> str:
        return self.foreground

    @property
    def cream(self) -> str:
        return self.background_alt

    @property
    def gray(self) -> str:
        return self.foreground_muted

    @property
    def display_font_family(self) -> str:
        return _first_family(self.font_serif)

    @property
    def sans_font_family(self) -> str:
        return _first_family(self.font_sans)

    @classmethod
    def from_site_config(cls, site_config: Dict[str, Any]) -> "Theme":
        """Construit le thème depuis le dict site.json complet (clé `theme`)."""
        theme = site_config.get("theme") if isinstance(site_config, dict) else None
        if not isinstance(theme, dict):
            return cls()

        candidates = {
            "brand":            _dig(theme, "semanticColors", "brand") or _dig(theme, "colors", "accent"),
            "brand_hover":      _dig(theme, "colors", "primary", "700"),
            "background":       _dig(theme, "semanticColors", "background"),
            "background_alt":   _dig(theme, "semanticColors", "backgroundAlt"),
            "surface":          _dig(theme, "semanticColors", "surface"),
            "foreground":       _dig(theme, "semanticColors", "foreground"),
            "foreground_muted": _dig(theme, "semanticColors", "foregroundMuted"),
            "border":           _dig(theme, "semanticColors", "border"),
            "gray_light":       _dig(theme, "colors", "secondary", "400"),
            "font_serif":       _dig(theme, "fonts", "display"),
            "font_sans":        _dig(theme, "fonts", "sans"),
            "hero_gradient":    _dig(theme, "gradients", "hero"),
            "card_gradient":    _dig(theme, "gradients", "card"),
        }
        # Seules les valeurs texte non vides remplacent les défauts
        return cls(**{k: v for k, v in candidates.items() if isinstance(v, str) and v})


def load_theme(site_json: Path) -> Theme:
    """Charge site.json ; fichier absent ou illisible → thème par défaut."""
    if not site_json.exists():
        log.warning("site.json introuvable (%s) : thème par défaut", site_json)
        return Theme()
    try:
        with open(site_json, encoding="utf-8") as f:
            return Theme.from_site_config(json.load(f))
    except (OSError, json.JSONDecodeError) as e:
        log.warning("site.json illisible (%s) : %s, thème par défaut", site_json, e)
        return Theme()
