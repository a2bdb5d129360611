"""
Sections de base : champs localisés tolérants + classe parente.

Une section est un dict JSON ouvert {"type": "...", ...}. Chaque type a son
modèle Pydantic qui porte tous les défauts : on valide une fois au parse,
les renderers lisent ensuite des attributs toujours présents.
"""
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _coerce_localized(value: Any) -> Any:
    # bool est un int : on l'écarte avant la conversion des nombres
    if value is None or isinstance(value, (str, dict)):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _text_or_none(value: Any) -> Any:
    return value if isinstance(value, str) else None


def _scalar_text(value: Any) -> Any:
    # texte, nombre converti en texte, sinon None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return _text_or_none(value)


def _none_to_empty(value: Any) -> Any:
    return [] if value is None else value


# Texte direct, dict {locale: texte} ou None. Les nombres deviennent du texte.
Localized = Annotated[Optional[Union[str, Dict[str, Any]]], BeforeValidator(_coerce_localized)]

# Texte simple ; toute autre valeur devient None.
Text = Annotated[Optional[str], BeforeValidator(_text_or_none)]

# Texte simple ; les nombres (timestamps...) deviennent du texte.
ScalarText = Annotated[Optional[str], BeforeValidator(_scalar_text)]


def ListOf(item_type: Any) -> Any:
    """Liste d'items typés ; null en entrée donne une liste vide."""
    return Annotated[List[item_type], BeforeValidator(_none_to_empty)]


class Entry(BaseModel):
    """Item imbriqué dans une section (bouton, stat, question...)."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class BaseSection(BaseModel):
    """Section de base : `type` ouvert + variante d'affichage libre."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = ""
    variant: Text = None
