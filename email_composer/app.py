"""
email_composer : app FastAPI
Démarrer : uvicorn email_composer.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI

from . import __version__
from .core import settings
from .router import router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s : %(message)s")
    app = FastAPI(title="email_composer : templates email", version=__version__, docs_url="/docs")
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    log.info("email_composer %s prêt", __version__)
    return app


app = create_app()
