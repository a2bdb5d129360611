"""Section Hero : image de fond, eyebrow/titre/sous-titre, boutons."""
from pydantic import AliasChoices, Field

from .base import BaseSection, Entry, ListOf, Localized, Text


class Button(Entry):
    text: Localized = None
    url: Localized = None
    variant: Text = "primary"

    @property
    def is_secondary(self) -> bool:
        return self.variant == "secondary"


class HeroSection(BaseSection):
    type: str = "hero-section"
    eyebrow: Localized = None
    title: Localized = None
    subtitle: Localized = None
    image: Localized = Field(default=None, validation_alias=AliasChoices("image", "backgroundImage"))
    buttons: ListOf(Button) = Field(default_factory=list)
