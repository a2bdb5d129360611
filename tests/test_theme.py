"""Tests thème : défauts, lecture de site.json, chargement tolérant."""
import json

import pytest
from pydantic import ValidationError

from cinqueterre.core.theme import Theme, load_theme


def test_theme_defaults():
    t = Theme()
    assert t.brand == "#0d9488"
    assert t.brand_hover == "#0f766e"
    assert t.navy == t.foreground == "#0a1628"
    assert t.cream == t.background_alt == "#fafaf9"
    assert t.gray == t.foreground_muted == "#64748b"
    assert t.display_font_family == "Cormorant Garamond"
    assert t.sans_font_family == "Inter"


def test_theme_is_frozen():
    with pytest.raises(ValidationError):
        Theme().brand = "#000000"


def test_from_site_config_semantic_colors_and_fonts():
    t = Theme.from_site_config({"theme": {
        "semanticColors": {"brand": "#ff0000", "foreground": "#111111"},
        "fonts": {"display": "'Playfair Display', serif"},
        "gradients": {"hero": "none"},
    }})
    assert t.brand == "#ff0000"
    assert t.navy == "#111111"
    assert t.display_font_family == "Playfair Display"
    assert t.hero_gradient == "none"
    # les autres tokens gardent leur repli
    assert t.border == "#e5e7eb"


def test_from_site_config_brand_falls_back_to_accent():
    t = Theme.from_site_config({"theme": {"colors": {"accent": "#123456", "primary": {"700": "#654321"}}}})
    assert t.brand == "#123456"
    assert t.brand_hover == "#654321"


def test_from_site_config_ignores_non_string_values():
    t = Theme.from_site_config({"theme": {"semanticColors": {"brand": 123, "border": ""}}})
    assert t == Theme()


def test_from_site_config_without_theme():
    assert Theme.from_site_config({}) == Theme()
    assert Theme.from_site_config({"theme": "dark"}) == Theme()


def test_load_theme_missing_file(tmp_path):
    assert load_theme(tmp_path / "site.json") == Theme()


def test_load_theme_invalid_json(tmp_path):
    path = tmp_path / "site.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_theme(path) == Theme()


def test_load_theme_reads_file(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps({"theme": {"semanticColors": {"brand": "#abcdef"}}}), encoding="utf-8")
    assert load_theme(path).brand == "#abcdef"
