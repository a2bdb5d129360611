"""Section FAQ : paires question / réponse (alias q / a acceptés)."""
from typing import Any

from pydantic import AliasChoices, Field, model_validator

from .base import BaseSection, Entry, ListOf, Localized


class FaqItem(Entry):
    question: Localized = Field(default=None, validation_alias=AliasChoices("question", "q"))
    answer: Localized = Field(default=None, validation_alias=AliasChoices("answer", "a"))


class FaqSection(BaseSection):
    type: str = "faq-section"
    title: Localized = None
    faqs: ListOf(FaqItem) = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _faqs_or_items(cls, data: Any) -> Any:
        """`faqs` vide ou absent → repli sur `items`."""
        if not isinstance(data, dict) or "items" not in data:
            return data
        data = dict(data)
        items = data.pop("items")
        if not data.get("faqs"):
            data["faqs"] = items
        return data
