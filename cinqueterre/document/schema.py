"""
Schéma d'un document de page (un fichier JSON par page).

{
  "title": {"en": "Monterosso"},
  "seo": {"title": "...", "description": "..."},
  "body": [ {"type": "hero-section", ...}, ... ],
  "metadata": {"city": "monterosso", "page_type": "hiking"},
  "updated_at": "2025-12-12T23:00:00.000Z"
}

Le body reste une liste de dicts bruts : chaque section est validée au rendu,
une section invalide ne doit pas empêcher le rendu du reste de la page.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..sections.base import ListOf, Localized, ScalarText, Text


class Seo(BaseModel):
    model_config = ConfigDict(extra="allow")
    title: Localized = None
    description: Localized = None


class PageMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")
    city: Text = None
    page_type: Text = None


class PageDocument(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Localized = None
    seo: Seo = Field(default_factory=Seo)
    body: ListOf(Any) = Field(default_factory=list)
    metadata: PageMetadata = Field(default_factory=PageMetadata)
    page_type: Text = None
    updated_at: ScalarText = None

    @field_validator("seo", "metadata", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_empty(self) -> bool:
        return not self.body

    @property
    def city(self) -> Optional[str]:
        return self.metadata.city

    @property
    def effective_page_type(self) -> Optional[str]:
        """metadata.page_type en priorité, sinon page_type de premier niveau."""
        return self.metadata.page_type or self.page_type
