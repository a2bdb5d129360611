"""
Tests serveur de preview : GET /health, /_pages, /{route} (toujours 200).
"""
import pytest
from fastapi.testclient import TestClient

from cinqueterre.core.theme import Theme
from cinqueterre.router import normalize_path, render_route
from cinqueterre.server import create_app


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def client(settings, write_page):
    write_page("index", {"title": "Home", "body": [{"type": "hero-section", "title": "Bienvenue"}]})
    write_page("monterosso", {"title": "Monterosso"})
    write_page("monterosso/hiking", {"title": "Hiking", "body": [{"type": "Hero-Section", "title": "Sentiers"}]})
    with TestClient(create_app(settings)) as c:
        yield c


# ── Normalisation ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("path,route", [
    ("", "index"),
    ("/", "index"),
    ("monterosso", "monterosso"),
    ("/monterosso/hiking.html", "monterosso/hiking"),
    ("monterosso/hiking/", "monterosso/hiking"),
    ("index.html", "index"),
])
def test_normalize_path(path, route):
    assert normalize_path(path) == route


# ── Endpoints ─────────────────────────────────────────────────────────────

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "cinqueterre-preview"}


def test_root_renders_index(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Bienvenue" in r.text
    assert "Local Preview - index" in r.text


def test_nested_route_with_html_suffix(client):
    r = client.get("/monterosso/hiking.html")
    assert r.status_code == 200
    # dispatch insensible à la casse en preview
    assert 'class="hero-section"' in r.text
    assert "Sentiers" in r.text
    assert "subnav__link--active" in r.text


def test_missing_page_is_200(client):
    r = client.get("/nowhere/at-all")
    assert r.status_code == 200
    assert "not found" in r.text.lower()
    assert "nowhere/at-all" in r.text


def test_malformed_page_is_200(client, write_page):
    write_page("broken", None, raw="{not json")
    r = client.get("/broken")
    assert r.status_code == 200
    assert "could not be rendered" in r.text


def test_pages_are_read_fresh(client, write_page):
    assert "Bienvenue" in client.get("/").text
    write_page("index", {"title": "Home", "body": [{"type": "hero-section", "title": "Nouveau titre"}]})
    assert "Nouveau titre" in client.get("/").text


def test_pages_index_lists_top_level(client):
    r = client.get("/_pages")
    assert r.status_code == 200
    assert 'href="/index"' in r.text
    assert 'href="/monterosso"' in r.text
    assert 'href="/monterosso/hiking"' not in r.text


def test_route_outside_pages_dir_is_not_found(settings):
    html = render_route("../secret", settings, Theme())
    assert "Page not found: ../secret" in html


def test_docs_routes_are_content_pages(client, write_page):
    write_page("docs", {"title": "Docs", "body": [{"type": "hero-section", "title": "Guide pratique"}]})
    r = client.get("/docs")
    assert r.status_code == 200
    assert "Guide pratique" in r.text
    # /openapi.json n'est plus réservé par FastAPI
    assert "Page not found: openapi.json" in client.get("/openapi.json").text
