"""Tests documents de page : schéma, chargement, découverte des routes."""
import json

import pytest

from cinqueterre.document import (
    ContentError,
    PageDocument,
    discover_pages,
    load_document,
    read_json,
    resolve_route,
)


# ── Schéma ───────────────────────────────────────────────────────────────────

def test_document_defaults():
    doc = PageDocument.model_validate({})
    assert doc.is_empty
    assert doc.body == []
    assert doc.seo.title is None
    assert doc.city is None
    assert doc.effective_page_type is None


def test_document_null_blocks_tolerated():
    doc = PageDocument.model_validate({"seo": None, "metadata": None, "body": None})
    assert doc.is_empty
    assert doc.seo.description is None


def test_page_type_precedence():
    doc = PageDocument.model_validate({"page_type": "blog", "metadata": {"page_type": "faq", "city": "manarola"}})
    assert doc.effective_page_type == "faq"
    assert doc.city == "manarola"
    assert PageDocument.model_validate({"page_type": "blog"}).effective_page_type == "blog"


def test_body_keeps_raw_sections():
    doc = PageDocument.model_validate({"body": [{"type": "anything", "x": 1}, "junk"]})
    assert doc.body == [{"type": "anything", "x": 1}, "junk"]
    assert not doc.is_empty


# ── Chargement ───────────────────────────────────────────────────────────────

def test_load_document(tmp_path):
    path = tmp_path / "page.json"
    path.write_text(json.dumps({"title": "Vernazza", "body": [{"type": "hero-section"}]}), encoding="utf-8")
    doc = load_document(path)
    assert doc.title == "Vernazza"
    assert len(doc.body) == 1


@pytest.mark.parametrize("text", ["{not json", "[1, 2]", '"string"'])
def test_read_json_rejects_bad_files(tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ContentError) as exc:
        read_json(path)
    assert exc.value.path == path


def test_read_json_missing_file(tmp_path):
    with pytest.raises(ContentError):
        read_json(tmp_path / "missing.json")


def test_load_document_schema_error(tmp_path):
    path = tmp_path / "page.json"
    path.write_text(json.dumps({"body": "not a list"}), encoding="utf-8")
    with pytest.raises(ContentError) as exc:
        load_document(path)
    assert str(path) in str(exc.value)


# ── Découverte + routes ──────────────────────────────────────────────────────

def test_discover_pages_sorted_and_recursive(tmp_path):
    for rel in ("index.json", "monterosso.json", "monterosso/hiking.json", "fr/index.json", "notes.txt"):
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("{}", encoding="utf-8")
    refs = discover_pages(tmp_path)
    assert [r.route for r in refs] == ["fr/index", "index", "monterosso", "monterosso/hiking"]
    assert refs[3].json_path == tmp_path / "monterosso" / "hiking.json"


def test_discover_pages_empty_dir(tmp_path):
    assert discover_pages(tmp_path) == []


def test_resolve_route(tmp_path):
    assert resolve_route(tmp_path, "monterosso/hiking") == (tmp_path / "monterosso" / "hiking.json").resolve()
    for bad in ("", "../secret", "a/../../b", "a//b", "./index"):
        assert resolve_route(tmp_path, bad) is None


# ── Champs scalaires tolérants ───────────────────────────────────────────────

def test_numeric_updated_at_becomes_text():
    doc = PageDocument.model_validate({"updated_at": 1702425600, "body": []})
    assert doc.updated_at == "1702425600"


def test_non_string_city_and_page_type_ignored():
    doc = PageDocument.model_validate({"page_type": 7, "metadata": {"city": ["x"], "page_type": {"a": 1}}})
    assert doc.city is None
    assert doc.effective_page_type is None
