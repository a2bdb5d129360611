"""
Chargement des documents de page depuis le disque + découverte des routes.

La route d'une page est son chemin relatif sans extension :
  pages/index.json                → "index"
  pages/monterosso/hiking.json    → "monterosso/hiking"
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import ValidationError

from .schema import PageDocument

log = logging.getLogger(__name__)


class ContentError(Exception):
    """Document illisible, JSON invalide ou structure refusée par le schéma."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class PageRef(NamedTuple):
    json_path: Path
    route: str


def read_json(path: Path) -> Dict[str, Any]:
    """Lit un fichier JSON (ContentError si illisible / invalide / pas un objet)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ContentError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ContentError(path, "le document doit être un objet JSON")
    return data


def load_document(path: Path) -> PageDocument:
    """Charge + valide un document de page."""
    data = read_json(path)
    try:
        return PageDocument.model_validate(data)
    except ValidationError as e:
        raise ContentError(path, str(e)) from e


def discover_pages(pages_dir: Path) -> List[PageRef]:
    """Tous les .json sous `pages_dir` (récursif), triés par route."""
    refs = [
        PageRef(json_path=p, route=p.relative_to(pages_dir).with_suffix("").as_posix())
        for p in pages_dir.rglob("*.json")
        if p.is_file()
    ]
    return sorted(refs, key=lambda r: r.route)


def resolve_route(pages_dir: Path, route: str) -> Optional[Path]:
    """
    Chemin du JSON d'une route, ou None si la route sort de `pages_dir`.
    N'indique pas si le fichier existe.
    """
    if not route or any(part in ("", ".", "..") for part in route.split("/")):
        return None
    candidate = (pages_dir / f"{route}.json").resolve()
    try:
        candidate.relative_to(pages_dir.resolve())
    except ValueError:
        log.warning("Route hors du répertoire des pages refusée : %s", route)
        return None
    return candidate
