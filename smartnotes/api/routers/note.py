"""
Endpoints para `notes` (CRUD con tags generados por IA).
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from smartnotes.api.deps import get_classifier, get_note_repo
from smartnotes.api.schemas.note import (
    NoteCreate,
    NoteDeleteResponse,
    NoteMutationResponse,
    NoteOut,
    NoteUpdate,
)
from smartnotes.infrastructure.ai.hf_client import TextClassifier
from smartnotes.repositories.note_repo import NoteRepository
from smartnotes.services import note_service

_log = logging.getLogger("smartnotes.notes")

router = APIRouter(prefix="/notes", tags=["Notes"])

_NOT_FOUND = "Note not found"


def _store_error(action: str, e: Exception) -> HTTPException:
    _log.error("Error %s note: %s", action, e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": f"Error {action} notes", "error": str(e)},
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteMutationResponse,
    summary="Crear nota",
    description="Crea una nota y le asigna tags generados a partir de `description`.",
)
def create_note(
    payload: NoteCreate,
    repo: NoteRepository = Depends(get_note_repo),
    classifier: TextClassifier = Depends(get_classifier),
) -> NoteMutationResponse:
    try:
        doc = note_service.create_note(repo, classifier, payload.model_dump())
    except PyMongoError as e:
        raise _store_error("creating", e)
    return NoteMutationResponse(message="Notes created successfully with AI tags", data=NoteOut(**doc))


@router.get("", response_model=List[NoteOut], summary="Listar notas", description="Todas las notas, más recientes primero.")
def get_notes(repo: NoteRepository = Depends(get_note_repo)) -> List[NoteOut]:
    try:
        return [NoteOut(**d) for d in note_service.list_notes(repo)]
    except PyMongoError as e:
        raise _store_error("fetching", e)


@router.patch(
    "/{note_id}",
    response_model=NoteMutationResponse,
    summary="Actualizar nota",
    description="Actualiza la nota; los tags se regeneran sólo si llega `description`.",
)
def update_note(
    note_id: str,
    payload: NoteUpdate,
    repo: NoteRepository = Depends(get_note_repo),
    classifier: TextClassifier = Depends(get_classifier),
) -> NoteMutationResponse:
    try:
        doc = note_service.update_note(repo, classifier, note_id, payload.model_dump(exclude_unset=True))
    except PyMongoError as e:
        raise _store_error("updating", e)
    if doc is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return NoteMutationResponse(message="Note updated successfully with new tags", data=NoteOut(**doc))


@router.delete("/{note_id}", response_model=NoteDeleteResponse, summary="Eliminar nota")
def delete_note(note_id: str, repo: NoteRepository = Depends(get_note_repo)) -> NoteDeleteResponse:
    try:
        doc = note_service.delete_note(repo, note_id)
    except PyMongoError as e:
        raise _store_error("deleting", e)
    if doc is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return NoteDeleteResponse(message="Note deleted successfully", deletedNote=NoteOut(**doc))
