"""Schemas del preview de tags (`/tags/generate-tags`)."""
from typing import List, Optional
from pydantic import BaseModel

from smartnotes.services.tag_ranker import StarTag, Tag, TopTag


class TagPreviewIn(BaseModel):
    text: Optional[str] = None


class TagPreviewOut(BaseModel):
    success: bool
    tags: List[Tag]
    star_tag: Optional[StarTag] = None
    top_tag: Optional[TopTag] = None
    input_length: int
