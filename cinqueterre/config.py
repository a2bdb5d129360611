"""
Configuration : chemins du contenu / de la sortie + réglages du serveur de preview.

Tout passe par des variables d'environnement (défauts raisonnables) :
  CINQUETERRE_ROOT, CINQUETERRE_CONTENT_DIR, CINQUETERRE_DIST_DIR,
  CINQUETERRE_CNAME, CINQUETERRE_FR_PAGES_DIR, PREVIEW_HOST, PREVIEW_PORT,
  SITE_NAME, SITE_URL
"""
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    """Réglages immuables, construits une fois par process."""
    model_config = ConfigDict(frozen=True)

    root: Path
    content_dir: Path
    dist_dir: Path
    cname_path: Path
    fr_pages_dir: Optional[Path] = None
    preview_host: str = "127.0.0.1"
    preview_port: int = 8888
    site_name: str = "Cinqueterre.travel"
    site_url: str = "https://cinqueterre.travel"

    @property
    def pages_dir(self) -> Path:
        return self.content_dir / "pages"

    @property
    def site_json(self) -> Path:
        return self.content_dir / "site.json"

    @property
    def populate_dir(self) -> Path:
        """Racine scannée par le populator (pages FR par défaut)."""
        return self.fr_pages_dir or self.pages_dir / "fr"

    @classmethod
    def for_root(cls, root: Path, **overrides) -> "Settings":
        """Réglages par défaut pour un projet situé dans `root` (pratique en test)."""
        root = Path(root)
        values = {
            "root": root,
            "content_dir": root / "content",
            "dist_dir": root / "dist",
            "cname_path": root / "CNAME",
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_env(cls) -> "Settings":
        root = Path(os.getenv("CINQUETERRE_ROOT", str(Path.cwd())))
        content_dir = Path(os.getenv("CINQUETERRE_CONTENT_DIR", str(root / "content")))
        fr_dir = os.getenv("CINQUETERRE_FR_PAGES_DIR")
        return cls(
            root=root,
            content_dir=content_dir,
            dist_dir=Path(os.getenv("CINQUETERRE_DIST_DIR", str(root / "dist"))),
            cname_path=Path(os.getenv("CINQUETERRE_CNAME", str(root / "CNAME"))),
            fr_pages_dir=Path(fr_dir) if fr_dir else None,
            preview_host=os.getenv("PREVIEW_HOST", "127.0.0.1"),
            preview_port=int(os.getenv("PREVIEW_PORT", "8888")),
            site_name=os.getenv("SITE_NAME", "Cinqueterre.travel"),
            site_url=os.getenv("SITE_URL", "https://cinqueterre.travel").rstrip("/"),
        )
