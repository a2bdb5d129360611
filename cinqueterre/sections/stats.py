"""Section Stats : grille de chiffres clés (valeur + label + description)."""
from pydantic import AliasChoices, Field

from .base import BaseSection, Entry, ListOf, Localized


class StatItem(Entry):
    value: Localized = Field(default=None, validation_alias=AliasChoices("number", "value"))
    label: Localized = None
    description: Localized = None


class StatsSection(BaseSection):
    type: str = "stats-section"
    eyebrow: Localized = None
    title: Localized = None
    stats: ListOf(StatItem) = Field(default_factory=list)
