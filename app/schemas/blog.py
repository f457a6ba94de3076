from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    excerpt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    createdAt: Optional[datetime] = Field(default=None, validation_alias="created_at")
    updatedAt: Optional[datetime] = Field(default=None, validation_alias="updated_at")

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_never_null(cls, value):
        return value or []


class PostDetail(PostSummary):
    content: str


class PostUpsert(BaseModel):
    """Body of POST /posts."""

    id: str = Field(min_length=1, max_length=64)
    title: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        tags: List[str] = []
        for tag in value:
            if not isinstance(tag, str):
                return value  # let type validation report it
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags


class DeleteResult(BaseModel):
    deleted: bool = True
    id: str
