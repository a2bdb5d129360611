"""
i18n : résolution des valeurs localisées + échappement HTML.

Une valeur localisée est soit un texte direct, soit un dict {locale: texte}.
  "Bonjour"                      → "Bonjour"
  {"en": "Hello", "fr": "Salut"} → selon la locale demandée, repli sur "en"
  None / 42 / []                 → ""
"""
import re
from typing import Any

DEFAULT_LOCALE = "en"

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")


def resolve(value: Any, locale: str = DEFAULT_LOCALE) -> str:
    """
    Résout une valeur localisée en texte affichable. Ne lève jamais.

    Ordre de repli pour un dict : locale demandée → "en" → première valeur → "".
    Les entrées vides comptent comme absentes.
    """
    if isinstance(value, str):
        return value
    if not isinstance(value, dict) or not value:
        return ""

    first = next(iter(value.values()))
    for candidate in (value.get(locale), value.get(DEFAULT_LOCALE), first):
        if candidate:
            return candidate if isinstance(candidate, str) else str(candidate)
    return ""


def escape(text: Any) -> str:
    """Échappe & < > " (le & d'abord, sinon double échappement)."""
    if not isinstance(text, str) or not text:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def expand_bold(text: str, style: str = "") -> str:
    """
    Remplace **gras** par <strong>. Le texte n'est PAS échappé ici :
    le contenu rédigé est considéré comme de confiance.
    """
    open_tag = f'<strong style="{style}">' if style else "<strong>"
    return _BOLD_RE.sub(lambda m: f"{open_tag}{m.group(1)}</strong>", text or "")


def locale_from_route(route: str, locales: tuple = ("fr",)) -> str:
    """Locale d'affichage déduite du premier segment de la route ("fr/..." → "fr")."""
    head = (route or "").split("/", 1)[0]
    return head if head in locales else DEFAULT_LOCALE
