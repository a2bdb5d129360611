"""
Build statique : content/pages/**.json → dist/**/index.html

Usage : python -m cinqueterre.builder   (ou cinqueterre-build)

Une page en erreur est loggée puis ignorée : le build continue toujours.
"""
import logging
import shutil
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .config import Settings
from .core.theme import Theme, load_theme
from .document import ContentError, PageRef, discover_pages, load_document
from .renderer import RenderMode, assemble_page

log = logging.getLogger(__name__)


class BuildReport(BaseModel):
    built: List[str] = Field(default_factory=list)
    failed: List[Tuple[str, str]] = Field(default_factory=list)
    cname_copied: bool = False

    @property
    def ok(self) -> bool:
        return not self.failed


def output_path(dist_dir: Path, route: str) -> Path:
    """"index" → dist/index.html ; "a/b" → dist/a/b/index.html."""
    if route == "index":
        return dist_dir / "index.html"
    return dist_dir / route / "index.html"


def reset_dist(dist_dir: Path) -> None:
    """Supprime puis recrée la sortie : aucun reste d'un build précédent."""
    if dist_dir.exists():
        shutil.rmtree(dist_dir)
    dist_dir.mkdir(parents=True, exist_ok=True)


def build_page(ref: PageRef, settings: Settings, theme: Theme) -> Path:
    document = load_document(ref.json_path)
    html = assemble_page(
        document,
        ref.route,
        theme=theme,
        mode=RenderMode.BUILD,
        site_name=settings.site_name,
        site_url=settings.site_url,
    )
    target = output_path(settings.dist_dir, ref.route)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(html, encoding="utf-8")
    return target


def build_site(settings: Settings, theme: Optional[Theme] = None) -> BuildReport:
    """Build complet : reset dist, rend chaque page, copie CNAME."""
    theme = theme or load_theme(settings.site_json)
    report = BuildReport()

    reset_dist(settings.dist_dir)

    refs = discover_pages(settings.pages_dir)
    log.info("%d page(s) trouvée(s) dans %s", len(refs), settings.pages_dir)

    for ref in refs:
        try:
            build_page(ref, settings, theme)
        except ContentError as e:
            log.error("Erreur build %s : %s", ref.route, e.message)
            report.failed.append((ref.route, e.message))
        except OSError as e:
            log.error("Écriture impossible pour %s : %s", ref.route, e)
            report.failed.append((ref.route, str(e)))
        else:
            report.built.append(ref.route)

    if settings.cname_path.exists():
        shutil.copyfile(settings.cname_path, settings.dist_dir / "CNAME")
        report.cname_copied = True
        log.info("CNAME copié")

    log.info("Build terminé : %d page(s) → %s (%d en erreur)",
             len(report.built), settings.dist_dir, len(report.failed))
    return report


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
    settings = Settings.from_env()
    if not settings.pages_dir.is_dir():
        log.error("Répertoire des pages introuvable : %s", settings.pages_dir)
        return 1
    build_site(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
