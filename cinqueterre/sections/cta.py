"""Section CTA : appel à l'action sur fond dégradé."""
from pydantic import Field

from .base import BaseSection, ListOf, Localized
from .hero import Button


class CtaSection(BaseSection):
    type: str = "cta-section"
    eyebrow: Localized = None
    title: Localized = None
    subtitle: Localized = None
    buttons: ListOf(Button) = Field(default_factory=list)
