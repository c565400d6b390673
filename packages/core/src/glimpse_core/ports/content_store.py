"""IContentStore — the content store protocol the post block queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.content import ContentItem, Taxonomy, Term


@runtime_checkable
class IContentQuery(Protocol):
    """Filter, order and limit vocabulary a content store understands.

    ``id_filter`` restricts results to the listed ids. When
    ``is_explicit_order`` is true, results follow ``id_filter`` order;
    otherwise they are newest first.
    """

    @property
    def limit(self) -> int: ...

    @property
    def category_filter(self) -> int | None: ...

    @property
    def tag_filter(self) -> tuple[int, ...] | None: ...

    @property
    def id_filter(self) -> tuple[int, ...] | None: ...

    @property
    def is_explicit_order(self) -> bool: ...


@runtime_checkable
class IContentStore(Protocol):
    """
    Read-only access to published content.

    Implementations raise
    :class:`~glimpse_core.primitives.exceptions.ContentStoreError` when
    the backing corpus is unavailable. An empty list always means
    "nothing matched".
    """

    def fetch(self, query: IContentQuery) -> list[ContentItem]:
        """Return at most ``query.limit`` published items, ordered."""
        ...

    def list_terms(self, taxonomy: Taxonomy) -> list[Term]:
        """Return every term of ``taxonomy``, including unused ones."""
        ...

    def list_recent(self, limit: int) -> list[ContentItem]:
        """Return the ``limit`` most recent published items."""
        ...
