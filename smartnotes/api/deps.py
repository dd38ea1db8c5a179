"""
Dependencias reutilizables para routers (FastAPI Depends).

Los colaboradores (settings, repositorio, clasificador) viven en `app.state`
y se construyen en `create_app`; en tests se sustituyen por fakes.
"""
from fastapi import HTTPException, Request
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from smartnotes.core.config import Settings
from smartnotes.infrastructure.ai.hf_client import TextClassifier
from smartnotes.repositories.note_repo import NoteRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_note_repo(request: Request) -> NoteRepository:
    repo = getattr(request.app.state, "note_repo", None)
    if repo is None:
        raise HTTPException(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail="Database not available")
    return repo


def get_classifier(request: Request) -> TextClassifier:
    return request.app.state.classifier
