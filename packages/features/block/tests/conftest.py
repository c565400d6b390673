"""Shared fixtures for post block tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from glimpse_core.adapters.memory import InMemoryContentStore
from glimpse_core.domain.content import ContentItem, Taxonomy, Term

BASE = datetime(2025, 3, 1, tzinfo=timezone.utc)


def _make_post(post_id: int, days: int = 0, **kwargs: object) -> ContentItem:
    defaults: dict[str, object] = {
        "title": f"Post {post_id}",
        "excerpt": f"Excerpt of post {post_id}",
        "permalink": f"https://example.com/?p={post_id}",
        "published_at": BASE + timedelta(days=days),
    }
    defaults.update(kwargs)
    return ContentItem(post_id=post_id, **defaults)


@pytest.fixture
def make_post() -> Callable[..., ContentItem]:
    """Factory for published posts with predictable title, excerpt and link."""
    return _make_post


@pytest.fixture
def store() -> InMemoryContentStore:
    """Store with three news posts, one tagged post and a draft."""
    return InMemoryContentStore(
        items=[
            _make_post(1, 1, category_ids=(3,), thumbnail_url="https://example.com/1.jpg"),
            _make_post(2, 2, category_ids=(3,), tag_ids=(7,)),
            _make_post(3, 3, category_ids=(3,)),
            _make_post(4, 4, tag_ids=(7,)),
            _make_post(5, 5, status="draft"),
        ],
        terms=[
            Term(term_id=3, name="News"),
            Term(term_id=7, name="Releases", taxonomy=Taxonomy.TAG),
        ],
    )
