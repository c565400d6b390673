"""Tests for content value objects and exceptions."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pydantic
import pytest

from glimpse_core.adapters.memory import InMemoryContentStore
from glimpse_core.domain.content import ContentItem, Taxonomy, Term
from glimpse_core.primitives.exceptions import (
    BlockNotFoundError,
    ContentStoreError,
    GlimpseError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)


def test_content_item_defaults() -> None:
    item = ContentItem(post_id=1)

    assert item.is_published
    assert not item.has_thumbnail
    assert item.category_ids == ()


def test_content_item_unpublished() -> None:
    assert not ContentItem(post_id=1, status="draft").is_published
    assert not ContentItem(post_id=1, post_type="page").is_published


def test_content_item_is_immutable() -> None:
    item = ContentItem(post_id=1, title="Hello")

    with pytest.raises(pydantic.ValidationError):
        item.title = "Changed"  # type: ignore[misc]


def test_naive_published_at_taken_as_utc() -> None:
    item = ContentItem(post_id=1, published_at=datetime(2025, 3, 1, 12, 0))

    assert item.published_at == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert item.published_at.tzinfo is timezone.utc


def test_aware_published_at_converted_to_utc() -> None:
    plus_two = timezone(timedelta(hours=2))
    published = datetime(2025, 3, 1, 12, 0, tzinfo=plus_two)

    item = ContentItem(post_id=1, published_at=published)

    assert item.published_at.tzinfo is timezone.utc
    assert item.published_at.hour == 10


def test_mixed_naive_and_aware_items_sort_newest_first() -> None:
    plus_two = timezone(timedelta(hours=2))
    store = InMemoryContentStore(
        items=[
            ContentItem(post_id=1, published_at=datetime(2025, 3, 1, 9, 0)),
            ContentItem(
                post_id=2,
                published_at=datetime(2025, 3, 1, 10, 0, tzinfo=plus_two),
            ),
            ContentItem(
                post_id=3,
                published_at=datetime(2025, 3, 1, 11, 0, tzinfo=timezone.utc),
            ),
        ]
    )

    assert [i.post_id for i in store.list_recent(5)] == [3, 1, 2]


def test_value_object_equality_and_hash() -> None:
    a = Term(term_id=3, name="News")
    b = Term(term_id=3, name="News")
    c = Term(term_id=3, name="News", taxonomy=Taxonomy.TAG)

    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_validation_error_shapes() -> None:
    assert ValidationError("bad").errors == {"__root__": ["bad"]}
    assert ValidationError().errors == {}
    assert ValidationError({"f": ["m"]}).errors == {"f": ["m"]}


def test_exception_hierarchy() -> None:
    assert issubclass(ContentStoreError, InfrastructureError)
    assert issubclass(InfrastructureError, GlimpseError)
    assert issubclass(BlockNotFoundError, NotFoundError)
    err = BlockNotFoundError("x/y")
    assert err.block_name == "x/y"
    assert "x/y" in str(err)
