"""
Router FastAPI du serveur de preview.

GET /health        → {"status": "ok", "service": "cinqueterre-preview"}
GET /_pages        → liste HTML des pages de premier niveau
GET /{page_path}   → page rendue en mode preview (toujours 200)

Chaque requête relit le JSON depuis le disque : pas de cache.
"""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from .config import Settings
from .core.i18n import escape
from .core.theme import Theme
from .document import ContentError, load_document, resolve_route
from .renderer import RenderMode, assemble_page

log = logging.getLogger(__name__)

router = APIRouter(tags=["preview"])

INDEX_ROUTE = "index"


def normalize_path(page_path: str) -> str:
    """"/" → index ; "/a/b.html" → a/b ; "/a/b/" → a/b."""
    route = page_path.strip("/")
    if route.endswith(".html"):
        route = route[: -len(".html")]
    return route or INDEX_ROUTE


def _message_page(title: str, message: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{escape(title)}</title>
  <style>body {{ font-family: system-ui; padding: 2rem; max-width: 48rem; margin: 0 auto; }}</style>
</head>
<body>
  <h1>{escape(title)}</h1>
  <p>{escape(message)}</p>
  <p><a href="/_pages">Available pages</a></p>
</body>
</html>"""


def not_found_page(route: str) -> str:
    return _message_page("Not found", f"Page not found: {route}")


def render_error_page(route: str, error: str) -> str:
    return _message_page("Render error", f"Page {route} could not be rendered: {error}")


def pages_index_html(settings: Settings) -> str:
    """Liste des documents JSON directement sous le répertoire des pages."""
    pages_dir = settings.pages_dir
    names = []
    if pages_dir.is_dir():
        names = sorted(p.stem for p in pages_dir.iterdir() if p.is_file() and p.suffix == ".json")
    items = "\n    ".join(f'<li><a href="/{escape(n)}">{escape(n)}</a></li>' for n in names)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Local Preview - {escape(settings.site_name)}</title>
  <style>
    body {{ font-family: system-ui; padding: 2rem; max-width: 48rem; margin: 0 auto; }}
    h1 {{ margin-bottom: 2rem; }}
    ul {{ list-style: none; padding: 0; }}
    li {{ margin-bottom: 0.5rem; }}
    a {{ color: #0284c7; text-decoration: none; padding: 0.5rem 1rem; display: inline-block; background: #f0f9ff; border-radius: 0.25rem; }}
    a:hover {{ background: #dbeafe; }}
  </style>
</head>
<body>
  <h1>Local Preview</h1>
  <h2>Available Pages</h2>
  <ul>
    {items}
  </ul>
</body>
</html>"""


def render_route(route: str, settings: Settings, theme: Theme) -> str:
    """HTML d'une route : page rendue, page "not found" ou page d'erreur."""
    json_path = resolve_route(settings.pages_dir, route)
    if json_path is None or not json_path.is_file():
        log.info("Page absente : %s", route)
        return not_found_page(route)

    try:
        document = load_document(json_path)
    except ContentError as e:
        log.error("Erreur preview %s : %s", route, e.message)
        return render_error_page(route, e.message)

    return assemble_page(
        document,
        route,
        theme=theme,
        mode=RenderMode.PREVIEW,
        site_name=settings.site_name,
        site_url=settings.site_url,
    )


@router.get("/health", summary="Health check")
def health() -> dict:
    return {"status": "ok", "service": "cinqueterre-preview"}


@router.get("/_pages", response_class=HTMLResponse, summary="Liste des pages disponibles")
def pages_index(request: Request) -> HTMLResponse:
    return HTMLResponse(pages_index_html(request.app.state.settings))


@router.get("/{page_path:path}", response_class=HTMLResponse, summary="Rend une page en mode preview")
def page(page_path: str, request: Request) -> HTMLResponse:
    route = normalize_path(page_path)
    log.info("GET /%s → %s", page_path, route)
    state = request.app.state
    return HTMLResponse(render_route(route, state.settings, state.theme))
