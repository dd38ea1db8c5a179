"""Entrada principal de la app FastAPI (configura middlewares, excepciones, routers y colaboradores)."""
import logging
from typing import Optional

from fastapi import FastAPI

from smartnotes.api.router import api_router
from smartnotes.core.config import Settings
from smartnotes.core.exceptions import register_exception_handlers
from smartnotes.core.logging import setup_logging
from smartnotes.core.middleware import add_middlewares
from smartnotes.infrastructure.ai.hf_client import HuggingFaceClassifier, TextClassifier
from smartnotes.infrastructure.db.bootstrap import ensure_collections
from smartnotes.infrastructure.db.mongo import init_mongo
from smartnotes.repositories.note_repo import COLLECTION as NOTES_COLLECTION, NoteRepository

_log = logging.getLogger("smartnotes.startup")


def create_app(
    settings: Optional[Settings] = None,
    *,
    note_repo: Optional[NoteRepository] = None,
    classifier: Optional[TextClassifier] = None,
) -> FastAPI:
    """
    Construye la app. Si no se inyecta `note_repo`, se conecta a Mongo en el startup;
    si no se inyecta `classifier`, se usa la Inference API de Hugging Face.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.note_repo = note_repo
    app.state.classifier = classifier or HuggingFaceClassifier.from_settings(settings)
    app.state.mongo_client = None

    add_middlewares(app, settings)
    register_exception_handlers(app)

    @app.on_event("startup")
    def on_startup():
        if not settings.hf_configured:
            _log.error("HF_API_KEY no configurada; la generación de tags fallará")
        if app.state.note_repo is not None:
            return
        client, db = init_mongo(settings)
        if db is None:
            _log.warning("Mongo no listo; los endpoints de notas responderán 500")
            return
        # No impedir el arranque si fallan validadores/índices
        ensure_collections(db)
        app.state.mongo_client = client
        app.state.note_repo = NoteRepository(db[NOTES_COLLECTION])

    @app.on_event("shutdown")
    def on_shutdown():
        if app.state.mongo_client is not None:
            app.state.mongo_client.close()

    # Monta routers bajo el prefijo configurado
    app.include_router(api_router, prefix=settings.api_prefix_normalized)
    return app
