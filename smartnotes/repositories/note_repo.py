"""Repo de la colección `notes`.

- Sella `createdAt`/`updatedAt` en ISO-8601 UTC (Z, milisegundos).
- Expone `_id` como string; ids con formato inválido se tratan como inexistentes.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

COLLECTION = "notes"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _oid(note_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(note_id)
    except (InvalidId, TypeError):
        return None


def _out(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    d = dict(doc)
    d["_id"] = str(d.get("_id", ""))
    return d


class NoteRepository:
    def __init__(self, collection: Collection, clock: Callable[[], str] = _now_iso) -> None:
        self.collection = collection
        self._clock = clock

    def insert(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Inserta nota con defaults y devuelve el documento guardado."""
        data = dict(doc)
        now = self._clock()
        data.setdefault("tags", [])
        data.setdefault("top_tag", None)
        data.setdefault("star_tag", None)
        data["createdAt"] = now
        data["updatedAt"] = now
        res = self.collection.insert_one(data)
        data["_id"] = res.inserted_id
        return _out(data)

    def list_all(self) -> List[Dict[str, Any]]:
        """Lista todas las notas, más recientes primero."""
        return [_out(d) for d in self.collection.find({}).sort("createdAt", DESCENDING)]

    def get(self, note_id: str) -> Optional[Dict[str, Any]]:
        oid = _oid(note_id)
        if oid is None:
            return None
        return _out(self.collection.find_one({"_id": oid}))

    def update(self, note_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Aplica `$set` y devuelve el documento ya actualizado (o None si no existe)."""
        oid = _oid(note_id)
        if oid is None:
            return None
        set_ops = dict(fields)
        set_ops.pop("_id", None)
        set_ops.pop("createdAt", None)
        set_ops["updatedAt"] = self._clock()
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": set_ops},
            return_document=ReturnDocument.AFTER,
        )
        return _out(doc)

    def delete(self, note_id: str) -> Optional[Dict[str, Any]]:
        oid = _oid(note_id)
        if oid is None:
            return None
        return _out(self.collection.find_one_and_delete({"_id": oid}))
