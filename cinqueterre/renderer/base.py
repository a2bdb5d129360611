"""
Contexte de rendu + classement des sections par type.

Un seul jeu de renderers sert aux deux sorties :
  BUILD   → site statique (dist/), dispatch sensible à la casse
  PREVIEW → serveur local, dispatch insensible à la casse, quelques fragments
            propres au mode (testimonial, map, footer masqué, dump de debug)
"""
from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict

from ..core.i18n import DEFAULT_LOCALE, escape, resolve
from ..core.theme import Theme
from ..sections import SectionKind


class RenderMode(str, Enum):
    BUILD = "build"
    PREVIEW = "preview"


# Ordre de priorité : le premier tag contenu dans le type l'emporte
SECTION_PRIORITY: Tuple[SectionKind, ...] = (
    SectionKind.HERO,
    SectionKind.STATS,
    SectionKind.FEATURE,
    SectionKind.CONTENT,
    SectionKind.FAQ,
    SectionKind.CTA,
    SectionKind.TESTIMONIAL,
    SectionKind.COLLECTION_EMBED,
    SectionKind.FOOTER,
    SectionKind.MAP,
)

_COMMON = {
    SectionKind.HERO, SectionKind.STATS, SectionKind.FEATURE,
    SectionKind.CONTENT, SectionKind.FAQ, SectionKind.CTA,
}

MODE_KINDS = {
    RenderMode.BUILD:   _COMMON | {SectionKind.COLLECTION_EMBED},
    RenderMode.PREVIEW: _COMMON | {SectionKind.TESTIMONIAL, SectionKind.FOOTER, SectionKind.MAP},
}


def classify(type_name: str, mode: RenderMode = RenderMode.BUILD) -> SectionKind:
    """"hero-section", "split-hero" → HERO ; aucun tag reconnu → UNKNOWN."""
    name = type_name if mode is RenderMode.BUILD else type_name.lower()
    supported = MODE_KINDS[mode]
    for kind in SECTION_PRIORITY:
        if kind in supported and kind.value in name:
            return kind
    return SectionKind.UNKNOWN


class RenderContext(BaseModel):
    """Thème + mode + locale, passés explicitement à chaque renderer."""
    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme()
    mode: RenderMode = RenderMode.BUILD
    locale: str = DEFAULT_LOCALE

    @property
    def is_preview(self) -> bool:
        return self.mode is RenderMode.PREVIEW

    def t(self, value: Any) -> str:
        """Valeur localisée → texte brut (non échappé)."""
        return resolve(value, self.locale)

    def text(self, value: Any) -> str:
        """Valeur localisée → texte échappé pour insertion HTML."""
        return escape(resolve(value, self.locale))
