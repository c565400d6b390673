"""InMemoryContentStore — dict-backed content store for tests and embedding."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.content import ContentItem, Taxonomy, Term
from ...ports.content_store import IContentStore

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...ports.content_store import IContentQuery

logger = logging.getLogger(__name__)


class InMemoryContentStore(IContentStore):
    """In-memory implementation of ``IContentStore``.

    Stores items in a plain dict keyed by ``post_id`` and terms keyed by
    ``(taxonomy, term_id)``.
    """

    def __init__(
        self,
        items: Iterable[ContentItem] = (),
        terms: Iterable[Term] = (),
    ) -> None:
        self._items: dict[int, ContentItem] = {}
        self._terms: dict[tuple[Taxonomy, int], Term] = {}
        for item in items:
            self.add(item)
        for term in terms:
            self.add_term(term)

    def fetch(self, query: IContentQuery) -> list[ContentItem]:
        if query.id_filter:
            candidates = self._select_ids(query.id_filter)
            if not query.is_explicit_order:
                candidates = self._newest_first(candidates)
        else:
            candidates = self._newest_first(self._published())
        if query.category_filter:
            candidates = [
                item for item in candidates if query.category_filter in item.category_ids
            ]
        if query.tag_filter:
            wanted = set(query.tag_filter)
            candidates = [
                item for item in candidates if wanted.intersection(item.tag_ids)
            ]
        result = candidates[: max(query.limit, 0)]
        logger.debug("Fetched %d of %d stored items", len(result), len(self._items))
        return result

    def list_terms(self, taxonomy: Taxonomy) -> list[Term]:
        terms = [term for (tax, _), term in self._terms.items() if tax == taxonomy]
        return sorted(terms, key=lambda term: term.name.lower())

    def list_recent(self, limit: int) -> list[ContentItem]:
        return self._newest_first(self._published())[: max(limit, 0)]

    # ── Internals ────────────────────────────────────────────────

    def _published(self) -> list[ContentItem]:
        return [item for item in self._items.values() if item.is_published]

    def _select_ids(self, ids: tuple[int, ...]) -> list[ContentItem]:
        selected: list[ContentItem] = []
        seen: set[int] = set()
        for post_id in ids:
            item = self._items.get(post_id)
            if item is None or not item.is_published or post_id in seen:
                continue
            seen.add(post_id)
            selected.append(item)
        return selected

    @staticmethod
    def _newest_first(items: list[ContentItem]) -> list[ContentItem]:
        return sorted(
            items, key=lambda item: (item.published_at, item.post_id), reverse=True
        )

    # ── Test helpers ─────────────────────────────────────────────

    def add(self, item: ContentItem) -> int:
        self._items[item.post_id] = item
        return item.post_id

    def add_term(self, term: Term) -> int:
        self._terms[(term.taxonomy, term.term_id)] = term
        return term.term_id

    def clear(self) -> None:
        self._items.clear()
        self._terms.clear()

    def __len__(self) -> int:
        return len(self._items)
