"""Section Feature : grille 3 colonnes icône + titre + description."""
from pydantic import Field

from .base import BaseSection, Entry, ListOf, Localized


class FeatureItem(Entry):
    icon: Localized = None
    title: Localized = None
    description: Localized = None


class FeatureSection(BaseSection):
    type: str = "feature-section"
    eyebrow: Localized = None
    title: Localized = None
    subtitle: Localized = None
    features: ListOf(FeatureItem) = Field(default_factory=list)
