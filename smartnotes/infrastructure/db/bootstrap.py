"""
Bootstrap de la base Mongo: define y aplica el validador (JSON Schema) e índices de `notes`.
Se ejecuta al inicio de la app; no tumba el arranque si algo falla.
"""
from __future__ import annotations

from typing import Any, Dict, List
import logging
from pymongo.database import Database
from pymongo.errors import PyMongoError

from smartnotes.repositories.note_repo import COLLECTION as NOTES_COLLECTION

_log = logging.getLogger("smartnotes.mongo.bootstrap")


_TAG_SCHEMA: Dict[str, Any] = {
    "bsonType": "object",
    "properties": {
        "label": {"bsonType": "string"},
        "score": {"bsonType": ["double", "int"]},
        "rank": {"bsonType": "int", "minimum": 1},
    },
}

NOTE_VALIDATOR: Dict[str, Any] = {
    "bsonType": "object",
    "required": ["title", "description", "createdAt", "updatedAt"],
    "properties": {
        "title": {"bsonType": "string", "minLength": 1},
        "description": {"bsonType": "string", "minLength": 1},
        "tags": {"bsonType": "array", "maxItems": 5, "items": _TAG_SCHEMA},
        "top_tag": {"bsonType": ["object", "null"]},
        "star_tag": {
            "bsonType": ["object", "null"],
            "properties": {
                "label": {"bsonType": "string"},
                "is_star": {"bsonType": "bool"},
                "priority": {"bsonType": ["double", "int"]},
            },
        },
        "createdAt": {"bsonType": "string", "minLength": 10},
        "updatedAt": {"bsonType": "string", "minLength": 10},
    },
    "additionalProperties": True,
}


def _collmod_or_create(db: Database, name: str, validator: Dict[str, Any] | None) -> None:
    try:
        if name not in db.list_collection_names():
            if validator:
                db.create_collection(name, validator={"$jsonSchema": validator})
            else:
                db.create_collection(name)
        elif validator:
            db.command({
                "collMod": name,
                "validator": {"$jsonSchema": validator},
                "validationLevel": "moderate",
            })
    except PyMongoError as e:
        # Algunos motores no aceptan collMod sin privilegios; seguimos sin validator estricto.
        _log.warning("No se pudo aplicar validator en '%s': %s", name, e)


def _ensure_indexes(db: Database, name: str, indexes: List[Dict[str, Any]]) -> None:
    coll = db[name]
    for ix in indexes:
        ix = dict(ix)
        keys = ix.pop("keys")
        try:
            coll.create_index(keys, **ix)
        except PyMongoError as e:
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)


def ensure_collections(db: Database) -> None:
    """Garantiza la colección `notes`, su validador e índices mínimos."""
    _collmod_or_create(db, NOTES_COLLECTION, NOTE_VALIDATOR)
    _ensure_indexes(
        db,
        NOTES_COLLECTION,
        [
            {"keys": [("createdAt", -1)], "name": "ix_created_desc"},
            {"keys": [("star_tag.label", 1)], "name": "ix_star_label"},
        ],
    )
