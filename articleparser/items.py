"""Pydantic schemas for parsed articles and import drafts.

Python attributes are snake_case; ``model_dump(by_alias=True)`` produces the
camelCase wire form (``suggestedCategory``, ``estimatedReadTime`` ...)
consumed by the editorial front end.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from articleparser.settings import MAX_SUGGESTED_TAGS


class ArticleMetadata(BaseModel):
    """Optional document metadata; each field is ``None`` when absent."""

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    author: str | None = None
    publish_date: str | None = None
    description: str | None = None


class ParsedArticle(BaseModel):
    """Canonical output of one extraction call.  Immutable once built."""

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    title: str
    content: str = ""
    excerpt: str = ""
    suggested_category: str
    suggested_tags: tuple[str, ...] = ()
    estimated_read_time: int = Field(default=1, ge=1)
    word_count: int = Field(default=0, ge=0)
    images: tuple[str, ...] = ()
    headings: tuple[str, ...] = ()
    metadata: ArticleMetadata = Field(default_factory=ArticleMetadata)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("suggested_tags")
    @classmethod
    def check_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) > MAX_SUGGESTED_TAGS:
            raise ValueError(f"at most {MAX_SUGGESTED_TAGS} tags may be suggested")
        if len(set(v)) != len(v):
            raise ValueError("suggested tags must be unique")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase dict form, omitting absent metadata fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TaxonomyRecord(BaseModel):
    """A stored category or tag, as supplied by the calling application."""

    id: str
    slug: str
    name: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # Stores hand out integer or UUID keys interchangeably.
        return str(v) if v is not None else v


class ImportDraft(BaseModel):
    """Post row built from a parsed article, ready for the caller to persist."""

    title: str
    slug: str
    excerpt: str = ""
    content: str = ""
    cover_image_url: str | None = None
    category_id: str | None = None
    tag_ids: list[str] = Field(default_factory=list)
    status: str = "draft"
    estimated_read_time: int = 1
    author: str | None = None
    source_published_at: str | None = None

    @field_validator("status")
    @classmethod
    def check_status(cls, v: str) -> str:
        if v not in ("draft", "published"):
            raise ValueError(f"status must be 'draft' or 'published', got {v!r}")
        return v

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("draft title must not be blank")
        return v
