"""
Serveur de preview local.
Démarrer : cinqueterre-preview   (ou uvicorn cinqueterre.server:app --reload --port 8888)
"""
import logging
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .config import Settings
from .core.theme import load_theme
from .router import router

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """App FastAPI de preview ; le thème est chargé une fois au démarrage."""
    settings = settings or Settings.from_env()
    # pas de /docs ni /openapi.json : toutes les routes restent des pages
    app = FastAPI(
        title="Cinqueterre.travel - Local Preview",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.theme = load_theme(settings.site_json)
    app.include_router(router)
    log.info("Preview : pages lues depuis %s", settings.pages_dir)
    return app


def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
    settings = Settings.from_env()
    app = create_app(settings)
    log.info("Preview sur http://%s:%d", settings.preview_host, settings.preview_port)
    uvicorn.run(app, host=settings.preview_host, port=settings.preview_port)


if __name__ == "__main__":
    main()
