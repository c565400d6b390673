"""Tests for PostListingService."""

from __future__ import annotations

from typing import Any

import pytest

from glimpse_block.query import ListingStatus, PostListing, PostListingService
from glimpse_core.adapters.memory import InMemoryContentStore
from glimpse_core.domain.content import ContentItem, Taxonomy, Term
from glimpse_core.primitives.exceptions import ContentStoreError
from glimpse_filtering.composer import FilterComposer
from glimpse_filtering.configuration import FilterConfiguration


class UnavailableStore:
    """Store whose backend is down."""

    def fetch(self, query: Any) -> list[ContentItem]:
        raise ContentStoreError("database unavailable")

    def list_terms(self, taxonomy: Taxonomy) -> list[Term]:
        raise ContentStoreError("database unavailable")

    def list_recent(self, limit: int) -> list[ContentItem]:
        raise ContentStoreError("database unavailable")


class BrokenStore(UnavailableStore):
    def fetch(self, query: Any) -> list[ContentItem]:
        raise RuntimeError("bug")


def _list(store: Any, **attributes: object) -> PostListing:
    service = PostListingService(FilterComposer(), store)
    return service.list_posts(FilterConfiguration.from_attributes(attributes))


def test_lists_category_posts(store: InMemoryContentStore) -> None:
    listing = _list(store, category="3", numberOfPosts=2)

    assert listing.status is ListingStatus.OK
    assert [i.post_id for i in listing.items] == [3, 2]
    assert listing.descriptor.category_filter == 3
    assert listing.error is None


def test_explicit_selection_order(store: InMemoryContentStore) -> None:
    listing = _list(store, category="9", specificPosts=["1", "4", "2"])

    assert [i.post_id for i in listing.items] == [1, 4, 2]


def test_zero_matches_is_empty_not_failed(store: InMemoryContentStore) -> None:
    listing = _list(store, category="42")

    assert listing.status is ListingStatus.EMPTY
    assert listing.is_empty
    assert listing.error is None


def test_store_failure_is_reported(caplog: pytest.LogCaptureFixture) -> None:
    listing = _list(UnavailableStore(), category="3")

    assert listing.status is ListingStatus.FAILED
    assert listing.is_empty
    assert listing.error == "database unavailable"
    assert "Post query failed" in caplog.text


def test_unexpected_errors_propagate() -> None:
    with pytest.raises(RuntimeError):
        _list(BrokenStore())
