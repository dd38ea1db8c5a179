"""Fixtures compartidas: repositorio en memoria, clasificador stub y TestClient."""
import copy
import itertools
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from smartnotes.core.config import Settings
from smartnotes.main import create_app


class StubClassifier:
    """Devuelve resultados fijos o lanza la excepción configurada."""

    def __init__(self, results: Any = None, error: Optional[Exception] = None) -> None:
        self.results = results if results is not None else []
        self.error = error
        self.calls: List[str] = []

    def classify(self, text: str):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.results)


class InMemoryNoteRepository:
    """Misma interfaz que NoteRepository, sin Mongo."""

    def __init__(self) -> None:
        self.docs: Dict[str, Dict[str, Any]] = {}
        self._ticks = itertools.count(1)

    def _now(self) -> str:
        n = next(self._ticks)
        return f"2026-01-01T00:{n // 60:02d}:{n % 60:02d}.000Z"

    def insert(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        data = copy.deepcopy(doc)
        now = self._now()
        data.setdefault("tags", [])
        data.setdefault("top_tag", None)
        data.setdefault("star_tag", None)
        data["_id"] = str(ObjectId())
        data["createdAt"] = now
        data["updatedAt"] = now
        self.docs[data["_id"]] = data
        return copy.deepcopy(data)

    def list_all(self) -> List[Dict[str, Any]]:
        docs = sorted(self.docs.values(), key=lambda d: d["createdAt"], reverse=True)
        return copy.deepcopy(docs)

    def get(self, note_id: str) -> Optional[Dict[str, Any]]:
        doc = self.docs.get(note_id)
        return copy.deepcopy(doc) if doc else None

    def update(self, note_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        doc = self.docs.get(note_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(fields))
        doc["updatedAt"] = self._now()
        return copy.deepcopy(doc)

    def delete(self, note_id: str) -> Optional[Dict[str, Any]]:
        return self.docs.pop(note_id, None)


TECH_RESULTS = [
    {"label": "tech_and_science", "score": 0.95},
    {"label": "entertainment", "score": 0.3},
]


@pytest.fixture
def settings() -> Settings:
    return Settings(HF_API_KEY="hf_test", ENVIRONMENT="test")


@pytest.fixture
def classifier() -> StubClassifier:
    return StubClassifier(TECH_RESULTS)


@pytest.fixture
def repo() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture
def client(settings, repo, classifier) -> TestClient:
    app = create_app(settings, note_repo=repo, classifier=classifier)
    return TestClient(app)
