"""Tests populator FR : templates, ordre du body, idempotence, rapport."""
import json
from datetime import datetime, timezone

import pytest

from cinqueterre.populate import (
    TEMPLATES,
    PopulateResult,
    build_body,
    find_empty_pages,
    footer_block,
    populate_page,
    populate_tree,
    utc_timestamp,
)

STAMP = "2025-12-12T23:00:00.000Z"


def _types(body):
    return [s["type"] for s in body]


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


# ── Templates ────────────────────────────────────────────────────────────────

def test_twelve_templates():
    assert set(TEMPLATES) == {
        "getting-here", "things-to-do", "weather", "faq", "agriturismi", "apartments",
        "boat-tours", "camping", "insights", "maps", "sights", "blog",
    }


@pytest.mark.parametrize("page_type", sorted(TEMPLATES))
def test_template_body_shape(page_type):
    body = build_body(page_type, "monterosso")
    assert _types(body) == ["hero-section", "stats-section", "feature-section", "cta-section", "footer-section"]
    assert len(body[1]["stats"]) == 4
    assert len(body[2]["features"]) == 6
    assert body[0]["image"].startswith("https://images.unsplash.com/")
    assert "{" not in body[0]["title"] and "{" not in body[0]["subtitle"]


def test_village_phrasing():
    assert build_body("weather", "monterosso")[0]["title"] == "Météo de Monterosso"
    assert build_body("weather", "cinque-terre")[0]["title"] == "Météo des Cinque Terre"
    assert build_body("things-to-do", "vernazza")[0]["title"] == "Que Faire à Vernazza"
    assert build_body("boat-tours", "manarola")[0]["title"] == "Excursions en Bateau depuis Manarola"
    assert build_body("camping", "cinque-terre")[0]["title"] == "Camping près des Cinque Terre"
    assert build_body("faq", "corniglia")[0]["title"] == "FAQ Corniglia"


def test_cta_links_to_village():
    cta = build_body("maps", "riomaggiore")[3]
    assert [b["url"] for b in cta["buttons"]] == ["/fr/riomaggiore/hotels", "/fr/riomaggiore/things-to-do"]
    assert cta["subtitle"].endswith("visiter Riomaggiore.")
    assert build_body("maps", "cinque-terre")[3]["subtitle"].endswith("visiter les Cinque Terre.")


def test_hero_buttons():
    hero = build_body("blog", "monterosso")[0]
    assert hero["variant"] == "split-with-image"
    assert [b["variant"] for b in hero["buttons"]] == ["primary", "secondary"]
    assert hero["buttons"][1]["url"] == "/fr/cinque-terre/overview"


def test_generic_body_for_unknown_type():
    body = build_body("wine-bars", "vernazza")
    assert _types(body) == ["hero-section", "feature-section", "footer-section"]
    assert body[0]["title"] == "Vernazza - Wine Bars"
    assert len(body[1]["features"]) == 4
    assert body[0]["buttons"][1]["url"] == "/fr/vernazza"


def test_generic_body_without_page_type():
    assert build_body(None, "manarola")[0]["title"] == "Manarola - Page"


def test_footer_block():
    footer = footer_block()
    assert footer["type"] == "footer-section"
    assert footer["variant"] == "4-column-simple"
    assert footer["companyName"] == "Cinqueterre.travel"
    assert len(footer["columns"]) == 4
    assert [link["url"] for link in footer["columns"][0]["links"]] == [
        "/fr/monterosso", "/fr/vernazza", "/fr/corniglia", "/fr/manarola", "/fr/riomaggiore",
    ]
    assert [s["platform"] for s in footer["socialLinks"]] == ["instagram", "facebook"]


def test_utc_timestamp_format():
    assert utc_timestamp(datetime(2025, 12, 12, 23, 0, tzinfo=timezone.utc)) == STAMP
    assert utc_timestamp().endswith("Z")


# ── Fichiers ─────────────────────────────────────────────────────────────────

def test_populate_page_writes_body(tmp_path):
    path = _write(tmp_path / "manarola" / "weather.json", {
        "title": {"fr": "Météo"},
        "metadata": {"city": "manarola", "page_type": "weather"},
        "body": [],
        "custom": 1,
    })

    assert populate_page(path, updated_at=STAMP) is PopulateResult.POPULATED

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert text.startswith('{\n  "title"')
    assert "Météo de Manarola" in text
    data = json.loads(text)
    assert data["updated_at"] == STAMP
    assert data["custom"] == 1
    assert _types(data["body"]) == [
        "hero-section", "stats-section", "feature-section", "cta-section", "footer-section",
    ]


def test_populate_page_defaults_city_and_top_level_type(tmp_path):
    path = _write(tmp_path / "page.json", {"page_type": "sights"})
    assert populate_page(path, updated_at=STAMP) is PopulateResult.POPULATED
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["body"][0]["title"] == "Sites à Voir aux Cinque Terre"


def test_populate_page_is_idempotent(tmp_path):
    path = _write(tmp_path / "faq.json", {"metadata": {"city": "vernazza", "page_type": "faq"}, "body": []})
    assert populate_page(path, updated_at=STAMP) is PopulateResult.POPULATED
    first = path.read_bytes()

    assert populate_page(path, updated_at="2030-01-01T00:00:00.000Z") is PopulateResult.SKIPPED
    assert path.read_bytes() == first


def test_populate_page_bad_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{oops", encoding="utf-8")
    assert populate_page(path) is PopulateResult.FAILED
    assert path.read_text(encoding="utf-8") == "{oops"


def test_find_empty_pages(tmp_path):
    empty = _write(tmp_path / "a" / "empty.json", {"body": []})
    missing = _write(tmp_path / "b.json", {"title": "no body"})
    _write(tmp_path / "full.json", {"body": [{"type": "hero-section"}]})
    (tmp_path / "broken.json").write_text("nope", encoding="utf-8")

    assert find_empty_pages(tmp_path) == sorted([empty, missing])


def test_populate_tree_report(tmp_path):
    a = _write(tmp_path / "monterosso" / "weather.json", {"metadata": {"city": "monterosso", "page_type": "weather"}})
    b = _write(tmp_path / "full.json", {"body": [{"type": "hero-section"}]})
    c = tmp_path / "broken.json"
    c.write_text("nope", encoding="utf-8")

    report = populate_tree(tmp_path, updated_at=STAMP)

    assert report.populated == [a]
    assert report.skipped == [b]
    assert report.failed == [c]

    again = populate_tree(tmp_path, updated_at=STAMP)
    assert again.populated == []
    assert sorted(again.skipped) == sorted([a, b])


def test_populate_page_tolerates_odd_scalar_fields(tmp_path):
    path = _write(tmp_path / "faq.json", {
        "updated_at": 1702425600,
        "metadata": {"city": 12, "page_type": "faq"},
        "body": [],
    })

    assert populate_page(path, updated_at=STAMP) is PopulateResult.POPULATED

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["updated_at"] == STAMP
    assert data["body"][0]["title"] == "FAQ Cinque Terre"


def test_populate_page_non_string_page_type_gets_generic_body(tmp_path):
    path = _write(tmp_path / "x.json", {"page_type": 5, "metadata": {"city": "vernazza"}})
    assert populate_page(path, updated_at=STAMP) is PopulateResult.POPULATED
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["body"][0]["title"] == "Vernazza - Page"
