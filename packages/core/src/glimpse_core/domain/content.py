"""Content items and taxonomy terms served by a content store."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import Field, field_validator

from .value_object import ValueObject

PUBLISHED = "publish"
POST_TYPE = "post"


class Taxonomy(str, Enum):
    """Taxonomies a post can be filtered by."""

    CATEGORY = "category"
    TAG = "post_tag"


class Term(ValueObject):
    """A category or tag."""

    term_id: int
    name: str
    taxonomy: Taxonomy = Taxonomy.CATEGORY


class ContentItem(ValueObject):
    """A unit of publishable content (a post).

    ``category_ids`` and ``tag_ids`` reference :class:`Term` ids.
    """

    post_id: int
    title: str = ""
    excerpt: str = ""
    content: str = ""
    status: str = PUBLISHED
    post_type: str = POST_TYPE
    published_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    category_ids: tuple[int, ...] = ()
    tag_ids: tuple[int, ...] = ()
    permalink: str = ""
    thumbnail_url: str | None = None

    @field_validator("published_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # Naive datetimes are taken as UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def is_published(self) -> bool:
        return self.status == PUBLISHED and self.post_type == POST_TYPE

    @property
    def has_thumbnail(self) -> bool:
        return bool(self.thumbnail_url)
