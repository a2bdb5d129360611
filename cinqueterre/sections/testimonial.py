"""Section Testimonial : citation + auteur + rôle (preview uniquement)."""
from .base import BaseSection, Localized


class TestimonialSection(BaseSection):
    __test__ = False  # pas une classe de test pytest

    type: str = "testimonial-section"
    quote: Localized = None
    author: Localized = None
    role: Localized = None
