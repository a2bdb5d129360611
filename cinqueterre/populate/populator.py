"""
Populator FR : remplit le body des documents vides à partir des templates.

Usage : python -m cinqueterre.populate.populator   (ou cinqueterre-populate-fr)

Un document dont le body contient déjà des sections n'est jamais réécrit :
relancer le populator sur le même arbre ne change rien.
"""
import json
import logging
import re
import sys
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..config import Settings
from ..core.villages import REGION, display_name
from ..document import ContentError, PageDocument, read_json
from .templates import FR_PREFIX, TEMPLATES, footer_block, place

log = logging.getLogger(__name__)

GENERIC_PAGE_TYPE = "page"
GENERIC_IMAGE = "https://images.unsplash.com/photo-1516483638261-f4dbaf036963?w=1200&q=80"


class PopulateResult(str, Enum):
    POPULATED = "populated"
    SKIPPED = "skipped"
    FAILED = "failed"


class PopulateReport(BaseModel):
    populated: List[Path] = Field(default_factory=list)
    skipped: List[Path] = Field(default_factory=list)
    failed: List[Path] = Field(default_factory=list)

    def record(self, path: Path, result: PopulateResult) -> None:
        getattr(self, result.value).append(path)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC à la milliseconde : 2025-12-12T23:00:00.000Z."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _title_case(page_type: str) -> str:
    """"boat-tours" → "Boat Tours"."""
    return re.sub(r"\b\w", lambda m: m.group().upper(), page_type.replace("-", " "))


# ── Bodies ──────────────────────────────────────────────────────────────────

def build_body(page_type: Optional[str], village: str) -> List[Dict[str, Any]]:
    """hero → stats → feature → CTA → footer ; body générique si type inconnu."""
    template = TEMPLATES.get(page_type or "")
    if template is None:
        log.info("Pas de template pour %s : body générique", page_type)
        return build_generic_body(page_type or GENERIC_PAGE_TYPE, village)

    body: List[Dict[str, Any]] = [
        {
            "type": "hero-section",
            "variant": "split-with-image",
            **template.hero(village),
            "buttons": [
                {"text": "En Savoir Plus", "url": "#details", "variant": "primary"},
                {"text": "Voir Tous les Villages", "url": f"{FR_PREFIX}/{REGION}/overview",
                 "variant": "secondary"},
            ],
        },
    ]
    if template.stats:
        body.append({
            "type": "stats-section",
            "variant": "simple-grid",
            "eyebrow": "En un coup d'œil",
            "title": "Informations Clés",
            "stats": template.stat_items(),
        })
    body.append({
        "type": "feature-section",
        "variant": "simple-3x2-grid",
        "eyebrow": "Détails",
        "title": "Ce Qu'il Faut Savoir",
        "features": template.feature_items(),
    })
    body.append({
        "type": "cta-section",
        "variant": "simple-centered-with-gradient",
        "title": "Planifiez Votre Visite",
        "subtitle": f"Découvrez tout ce dont vous avez besoin pour visiter "
                    f"{place(village, ('les Cinque Terre', ''))}.",
        "buttons": [
            {"text": "Hébergements", "url": f"{FR_PREFIX}/{village}/hotels", "variant": "primary"},
            {"text": "Que Faire", "url": f"{FR_PREFIX}/{village}/things-to-do", "variant": "secondary"},
        ],
    })
    body.append(footer_block())
    return body


def build_generic_body(page_type: str, village: str) -> List[Dict[str, Any]]:
    name = display_name(village)
    return [
        {
            "type": "hero-section",
            "variant": "split-with-image",
            "eyebrow": "Découvrez",
            "title": f"{name} - {_title_case(page_type)}",
            "subtitle": f"Explorez {name} et découvrez tout ce que ce magnifique village a à offrir.",
            "buttons": [
                {"text": "En Savoir Plus", "url": "#", "variant": "primary"},
                {"text": "Retour", "url": f"{FR_PREFIX}/{village}", "variant": "secondary"},
            ],
            "image": GENERIC_IMAGE,
        },
        {
            "type": "feature-section",
            "variant": "simple-3x2-grid",
            "eyebrow": "À Découvrir",
            "title": "Points Forts",
            "features": [
                {"icon": "map-pin", "title": "Emplacement",
                 "description": "Au cœur des Cinque Terre, facilement accessible."},
                {"icon": "compass", "title": "À Explorer",
                 "description": "De nombreuses activités et sites à découvrir."},
                {"icon": "camera", "title": "Photographie",
                 "description": "Paysages et vues à couper le souffle."},
                {"icon": "utensils", "title": "Gastronomie",
                 "description": "Cuisine locale authentique et savoureuse."},
            ],
        },
        footer_block(),
    ]


# ── Fichiers ────────────────────────────────────────────────────────────────

def write_json(path: Path, content: Dict[str, Any]) -> None:
    """JSON indenté sur 2 espaces, accents conservés, newline final."""
    path.write_text(json.dumps(content, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def populate_page(path: Path, updated_at: Optional[str] = None) -> PopulateResult:
    """Remplit un document vide. Ne lève pas : les erreurs sont loggées et renvoyées FAILED."""
    try:
        content = read_json(path)
        document = PageDocument.model_validate(content)
    except ContentError as e:
        log.error("Erreur lecture %s : %s", path, e.message)
        return PopulateResult.FAILED
    except ValidationError as e:
        log.error("Document invalide %s : %s", path, e)
        return PopulateResult.FAILED

    if not document.is_empty:
        log.info("Ignoré %s : body déjà rempli", path)
        return PopulateResult.SKIPPED

    village = document.city or REGION
    content["body"] = build_body(document.effective_page_type, village)
    content["updated_at"] = updated_at or utc_timestamp()

    try:
        write_json(path, content)
    except OSError as e:
        log.error("Écriture impossible %s : %s", path, e)
        return PopulateResult.FAILED

    log.info("Rempli %s", path)
    return PopulateResult.POPULATED


def _json_files(root: Path) -> List[Path]:
    return sorted(p for p in root.rglob("*.json") if p.is_file())


def find_empty_pages(root: Path) -> List[Path]:
    """Documents sous `root` dont le body est absent ou vide."""
    empty = []
    for path in _json_files(root):
        try:
            document = PageDocument.model_validate(read_json(path))
        except ContentError as e:
            log.error("Erreur lecture %s : %s", path, e.message)
            continue
        except ValidationError as e:
            log.error("Document invalide %s : %s", path, e)
            continue
        if document.is_empty:
            empty.append(path)
    return empty


def populate_tree(root: Path, updated_at: Optional[str] = None) -> PopulateReport:
    """Passe sur tous les JSON de `root` ; un fichier en erreur n'arrête pas le run."""
    report = PopulateReport()
    stamp = updated_at or utc_timestamp()
    for path in _json_files(root):
        report.record(path, populate_page(path, updated_at=stamp))
    log.info("Terminé : %d rempli(s), %d ignoré(s), %d en erreur",
             len(report.populated), len(report.skipped), len(report.failed))
    return report


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
    settings = Settings.from_env()
    root = settings.populate_dir
    if not root.is_dir():
        log.error("Répertoire introuvable : %s", root)
        return 1
    log.info("%d page(s) vide(s) sous %s", len(find_empty_pages(root)), root)
    populate_tree(root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
