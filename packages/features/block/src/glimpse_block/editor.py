"""EditorDataProvider — option lists and labels for the block editor controls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from glimpse_core.domain.content import Taxonomy

from .settings import BlockSettings

if TYPE_CHECKING:
    from glimpse_core.ports.content_store import IContentStore

EDITOR_LABELS: dict[str, str] = {
    "selectCategory": "Select Category",
    "selectTags": "Select Tags",
    "selectPosts": "Select Specific Posts",
    "numberOfPosts": "Number of Posts",
    "showTitle": "Show Title",
    "showImage": "Show Featured Image",
    "showExcerpt": "Show Excerpt",
    "titleLink": "Link on Title",
    "buttonLink": "Show Read More Button",
    "buttonText": "Button Text",
}


class EditorDataProvider:
    """Builds the data the editor needs to populate its pickers.

    Each list starts with a placeholder entry whose ``id`` is ``""``;
    ids are strings, matching the block attribute types.
    """

    def __init__(
        self,
        store: IContentStore,
        settings: BlockSettings | None = None,
        labels: dict[str, str] | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or BlockSettings()
        self._labels = {**EDITOR_LABELS, **(labels or {})}

    def categories(self) -> list[dict[str, str]]:
        return self._term_options(Taxonomy.CATEGORY, self._labels["selectCategory"])

    def tags(self) -> list[dict[str, str]]:
        return self._term_options(Taxonomy.TAG, self._labels["selectTags"])

    def posts(self) -> list[dict[str, str]]:
        options = [{"title": self._labels["selectPosts"], "id": ""}]
        for item in self._store.list_recent(self._settings.editor_post_limit):
            options.append({"title": item.title, "id": str(item.post_id)})
        return options

    def get_editor_data(self) -> dict[str, Any]:
        return {
            "categories": self.categories(),
            "tags": self.tags(),
            "posts": self.posts(),
            "i18n": dict(self._labels),
        }

    def _term_options(self, taxonomy: Taxonomy, placeholder: str) -> list[dict[str, str]]:
        options = [{"name": placeholder, "id": ""}]
        for term in self._store.list_terms(taxonomy):
            options.append({"name": term.name, "id": str(term.term_id)})
        return options
