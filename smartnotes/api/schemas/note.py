"""
Esquemas Pydantic para `notes`.

Convenciones (compatibles con el front existente):
- `_id` como string hex del ObjectId.
- Timestamps `createdAt`/`updatedAt` en ISO-8601 UTC (sellados en el repositorio).
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from smartnotes.services.tag_ranker import StarTag, Tag, TopTag


def _required_trimmed(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be empty")
    return v


class NoteCreate(BaseModel):
    title: str
    description: str

    @field_validator("title", "description")
    @classmethod
    def _trim(cls, v: str) -> str:
        return _required_trimmed(v)


class NoteUpdate(BaseModel):
    """Campos editables; los ausentes no se tocan."""

    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("title", "description")
    @classmethod
    def _trim(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _required_trimmed(v)


class NoteOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    description: str
    tags: List[Tag] = Field(default_factory=list)
    top_tag: Optional[TopTag] = None
    star_tag: Optional[StarTag] = None
    createdAt: str
    updatedAt: str


class NoteMutationResponse(BaseModel):
    message: str
    data: NoteOut


class NoteDeleteResponse(BaseModel):
    message: str
    deletedNote: NoteOut
