"""Section Collection embed : grille de cartes (12 max), build uniquement."""
from typing import Any

from pydantic import Field, field_validator

from .base import BaseSection, Entry, ListOf, Localized

MAX_ITEMS = 12
DEFAULT_COLUMNS = 3


class CollectionItem(Entry):
    title: Localized = None
    image: Localized = None
    summary: Localized = None
    village: Localized = None
    url: Localized = None


class CollectionDisplay(Entry):
    columns: int = DEFAULT_COLUMNS

    @field_validator("columns", mode="before")
    @classmethod
    def _positive_columns(cls, value: Any) -> int:
        # null, 0, négatif ou illisible → 3 colonnes
        if isinstance(value, bool):
            return DEFAULT_COLUMNS
        try:
            columns = int(value)
        except (TypeError, ValueError):
            return DEFAULT_COLUMNS
        return columns if columns > 0 else DEFAULT_COLUMNS


class CollectionEmbedSection(BaseSection):
    type: str = "collection-embed"
    heading: Localized = None
    items: ListOf(CollectionItem) = Field(default_factory=list)
    display: CollectionDisplay = Field(default_factory=CollectionDisplay)
    show_view_all: bool = Field(default=False, alias="showViewAll")
    view_all_url: Localized = Field(default=None, alias="viewAllUrl")

    @field_validator("display", mode="before")
    @classmethod
    def _display_or_default(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @property
    def visible_items(self):
        return self.items[:MAX_ITEMS]
