"""Fixtures communes : arbre de contenu temporaire."""
import json
import sys, os
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from cinqueterre.config import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    (tmp_path / "content" / "pages").mkdir(parents=True)
    return Settings.for_root(tmp_path)


@pytest.fixture
def write_page(settings):
    """write_page("monterosso/hiking", {...}) → chemin du JSON écrit."""
    def _write(route: str, data, raw: str = None) -> Path:
        path = settings.pages_dir / f"{route}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        text = raw if raw is not None else json.dumps(data, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
