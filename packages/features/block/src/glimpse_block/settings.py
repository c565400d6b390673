"""BlockSettings — tunables for the post block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from glimpse_filtering.composer import DEFAULT_LIMIT, MAX_LIMIT, MIN_LIMIT

BLOCK_NAME = "glimpse-post-block/posts"


@dataclass(frozen=True)
class BlockSettings:
    """
    Immutable configuration of a post block instance.

    Attributes:
        block_name: Registered block type name.
        default_limit: Posts shown when ``numberOfPosts`` is unset.
        min_limit: Lower bound for ``numberOfPosts``.
        max_limit: Upper bound for ``numberOfPosts``.
        excerpt_words: Number of words kept in a rendered excerpt.
        excerpt_more: Suffix appended to a trimmed excerpt.
        editor_post_limit: Posts offered in the editor's post picker.
        no_posts_message: Text rendered when nothing is listed.
        image_size: Thumbnail size class added to rendered images.
    """

    block_name: str = BLOCK_NAME
    default_limit: int = DEFAULT_LIMIT
    min_limit: int = MIN_LIMIT
    max_limit: int = MAX_LIMIT
    excerpt_words: int = 20
    excerpt_more: str = "…"
    editor_post_limit: int = 50
    no_posts_message: str = "No posts found."
    image_size: str = "medium"

    def composer_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for :class:`~glimpse_filtering.FilterComposer`."""
        return {
            "default_limit": self.default_limit,
            "min_limit": self.min_limit,
            "max_limit": self.max_limit,
        }
