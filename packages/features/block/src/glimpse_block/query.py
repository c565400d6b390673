"""PostListingService — compose a post query and run it against a content store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from glimpse_core.primitives.exceptions import ContentStoreError

if TYPE_CHECKING:
    from glimpse_core.domain.content import ContentItem
    from glimpse_core.ports.content_store import IContentStore
    from glimpse_filtering.composer import FilterComposer
    from glimpse_filtering.configuration import FilterConfiguration
    from glimpse_filtering.descriptor import QueryDescriptor

logger = logging.getLogger(__name__)


class ListingStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class PostListing:
    """Outcome of listing posts.

    ``EMPTY`` means the store answered with no matches; ``FAILED`` means
    the store could not answer, with the reason in ``error``.
    """

    descriptor: QueryDescriptor
    status: ListingStatus
    items: list[ContentItem] = field(default_factory=list)
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.items


class PostListingService:
    """Runs composed post queries against a content store."""

    def __init__(self, composer: FilterComposer, store: IContentStore) -> None:
        self._composer = composer
        self._store = store

    def list_posts(self, config: FilterConfiguration) -> PostListing:
        descriptor = self._composer.compose(config)
        try:
            items = self._store.fetch(descriptor)
        except ContentStoreError as exc:
            logger.warning("Post query failed: %s", exc)
            return PostListing(
                descriptor=descriptor, status=ListingStatus.FAILED, error=str(exc)
            )
        items = list(items)[: descriptor.limit]
        status = ListingStatus.OK if items else ListingStatus.EMPTY
        return PostListing(descriptor=descriptor, status=status, items=items)
