"""Section Footer : pied de page multi-colonnes (écrit par le populator)."""
from pydantic import Field

from .base import BaseSection, Entry, ListOf, Localized, Text


class FooterLink(Entry):
    label: Localized = None
    url: Localized = None


class FooterColumn(Entry):
    title: Localized = None
    links: ListOf(FooterLink) = Field(default_factory=list)


class SocialLink(Entry):
    platform: Text = None
    url: Text = None


class FooterSection(BaseSection):
    type: str = "footer-section"
    company_name: Localized = Field(default=None, alias="companyName")
    company_description: Localized = Field(default=None, alias="companyDescription")
    copyright: Localized = None
    columns: ListOf(FooterColumn) = Field(default_factory=list)
    social_links: ListOf(SocialLink) = Field(default_factory=list, alias="socialLinks")
