"""
Query descriptor — the normalized, store-agnostic description of a post list.

The descriptor says *what* to fetch (published posts, which filter) and
*how* to shape it (ordering, limit). Content stores and query adapters
consume it; it never queries anything itself.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class ResultType(str, Enum):
    """Kind of items a descriptor selects."""

    PUBLISHED_POSTS = "published_posts"

    @property
    def post_type(self) -> str:
        return "post"

    @property
    def post_status(self) -> str:
        return "publish"


class OrderBy(str, Enum):
    """Result ordering."""

    DATE = "date"
    EXPLICIT = "explicit"


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class QueryDescriptor:
    """
    Immutable description of which posts to list.

    Attributes:
        result_type: Always published posts.
        order_by: ``DATE`` (newest first) or ``EXPLICIT`` (``id_filter`` order).
        order_direction: Direction for date ordering.
        limit: Maximum number of items, already bounded by the composer.
        category_filter: Category id, or ``None``.
        tag_filter: Tag ids (any of them matches), or ``None``.
        id_filter: Explicitly selected post ids, or ``None``.
    """

    limit: int
    result_type: ResultType = ResultType.PUBLISHED_POSTS
    order_by: OrderBy = OrderBy.DATE
    order_direction: OrderDirection = OrderDirection.DESC
    category_filter: int | None = None
    tag_filter: tuple[int, ...] | None = None
    id_filter: tuple[int, ...] | None = None

    @property
    def has_explicit_selection(self) -> bool:
        return bool(self.id_filter)

    @property
    def is_explicit_order(self) -> bool:
        return self.order_by is OrderBy.EXPLICIT

    @property
    def explicit_order(self) -> tuple[int, ...]:
        """Ids in the order results must follow; empty for date ordering."""
        if self.is_explicit_order and self.id_filter:
            return self.id_filter
        return ()

    def with_limit(self, limit: int) -> QueryDescriptor:
        """Return a copy with ``limit`` replaced."""
        return replace(self, limit=limit)

    def with_ordering(
        self,
        order_by: OrderBy,
        direction: OrderDirection = OrderDirection.DESC,
    ) -> QueryDescriptor:
        """Return a copy with updated ordering."""
        return replace(self, order_by=order_by, order_direction=direction)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary; absent filters are omitted."""
        result: dict[str, Any] = {
            "result_type": self.result_type.value,
            "order_by": self.order_by.value,
            "order_direction": self.order_direction.value,
            "limit": self.limit,
        }
        if self.category_filter is not None:
            result["category_filter"] = self.category_filter
        if self.tag_filter is not None:
            result["tag_filter"] = list(self.tag_filter)
        if self.id_filter is not None:
            result["id_filter"] = list(self.id_filter)
        return result
