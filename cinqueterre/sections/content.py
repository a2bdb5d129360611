"""Section Content : texte riche + image latérale optionnelle."""
from typing import Any

from .base import BaseSection, Localized


class ContentSection(BaseSection):
    type: str = "content-section"
    title: Localized = None
    headline: Localized = None
    subtitle: Localized = None
    eyebrow: Localized = None
    # Texte brut, liste d'items riches ou dict localisé (voir renderer.rich_text)
    content: Any = None
    image: Localized = None
