"""
Sections : exports publics + registre SectionKind → modèle.

Le `type` JSON est une chaîne ouverte ; le renderer le classe en SectionKind
(correspondance par sous-chaîne, voir renderer.base.classify) puis valide le
dict brut avec le modèle du registre.
"""
from enum import Enum
from typing import Any, Dict, Type

from .base import BaseSection, Entry, ListOf, Localized
from .hero import HeroSection, Button
from .stats import StatsSection, StatItem
from .feature import FeatureSection, FeatureItem
from .content import ContentSection
from .faq import FaqSection, FaqItem
from .cta import CtaSection
from .collection import CollectionEmbedSection, CollectionItem, CollectionDisplay, MAX_ITEMS
from .testimonial import TestimonialSection
from .footer import FooterSection, FooterColumn, FooterLink, SocialLink


class SectionKind(str, Enum):
    HERO = "hero"
    STATS = "stats"
    FEATURE = "feature"
    CONTENT = "content"
    FAQ = "faq"
    CTA = "cta"
    TESTIMONIAL = "testimonial"
    COLLECTION_EMBED = "collection-embed"
    FOOTER = "footer"
    MAP = "map"
    UNKNOWN = "unknown"


SECTION_MODELS: Dict[SectionKind, Type[BaseSection]] = {
    SectionKind.HERO:             HeroSection,
    SectionKind.STATS:            StatsSection,
    SectionKind.FEATURE:          FeatureSection,
    SectionKind.CONTENT:          ContentSection,
    SectionKind.FAQ:              FaqSection,
    SectionKind.CTA:              CtaSection,
    SectionKind.TESTIMONIAL:      TestimonialSection,
    SectionKind.COLLECTION_EMBED: CollectionEmbedSection,
    SectionKind.FOOTER:           FooterSection,
    SectionKind.MAP:              BaseSection,
    SectionKind.UNKNOWN:          BaseSection,
}


def parse_section(kind: SectionKind, raw: Dict[str, Any]) -> BaseSection:
    """Valide un dict de section avec le modèle de son type (ValidationError si invalide)."""
    return SECTION_MODELS[kind].model_validate(raw)


__all__ = [
    "BaseSection", "Entry", "ListOf", "Localized",
    "HeroSection", "Button",
    "StatsSection", "StatItem",
    "FeatureSection", "FeatureItem",
    "ContentSection",
    "FaqSection", "FaqItem",
    "CtaSection",
    "CollectionEmbedSection", "CollectionItem", "CollectionDisplay", "MAX_ITEMS",
    "TestimonialSection",
    "FooterSection", "FooterColumn", "FooterLink", "SocialLink",
    "SectionKind", "SECTION_MODELS", "parse_section",
]
