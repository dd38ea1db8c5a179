"""
Service layer for notes: CRUD sobre el repositorio + tags generados desde `description`.
"""
from typing import Any, Dict, List, Optional

from smartnotes.infrastructure.ai.hf_client import TextClassifier
from smartnotes.repositories.note_repo import NoteRepository
from smartnotes.services.tag_service import generate_tags_for_text


def create_note(repo: NoteRepository, classifier: TextClassifier, payload: Dict[str, Any]) -> Dict[str, Any]:
    tag_data = generate_tags_for_text(classifier, payload.get("description"))
    return repo.insert({**payload, **tag_data.as_dict()})


def list_notes(repo: NoteRepository) -> List[Dict[str, Any]]:
    return repo.list_all()


def update_note(
    repo: NoteRepository,
    classifier: TextClassifier,
    note_id: str,
    changes: Dict[str, Any],
) -> Optional[Dict[str, Any]]:
    """
    Actualiza la nota. Si llega `description` se recalculan los tags;
    si no, se conservan los tags existentes. Devuelve None si no existe.
    """
    existing = repo.get(note_id)
    if existing is None:
        return None

    fields = {k: v for k, v in changes.items() if v is not None}
    if fields.get("description"):
        fields.update(generate_tags_for_text(classifier, fields["description"]).as_dict())
    else:
        fields.update({
            "tags": existing.get("tags") or [],
            "top_tag": existing.get("top_tag"),
            "star_tag": existing.get("star_tag"),
        })
    return repo.update(note_id, fields)


def delete_note(repo: NoteRepository, note_id: str) -> Optional[Dict[str, Any]]:
    return repo.delete(note_id)
