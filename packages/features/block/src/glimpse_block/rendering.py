"""BlockRenderer — Jinja2 template fill for a post listing."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .settings import BlockSettings

if TYPE_CHECKING:
    from glimpse_filtering.configuration import DisplaySettings

    from .query import PostListing

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

SAFE_URL_SCHEMES = frozenset({"http", "https"})

_URL_NOISE = re.compile(r"[\x00-\x20\x7f]")


def safe_url(url: str | None) -> str:
    """Return ``url`` when it is http(s) or relative, else ``""``."""
    if not url:
        return ""
    cleaned = _URL_NOISE.sub("", url)
    try:
        scheme = urlsplit(cleaned).scheme.lower()
    except ValueError:
        return ""
    if scheme and scheme not in SAFE_URL_SCHEMES:
        return ""
    return cleaned


def trim_words(text: str | None, num_words: int = 20, more: str = "…") -> str:
    """Strip markup from ``text`` and keep its first ``num_words`` words.

    ``more`` is appended only when words were dropped.
    """
    if not text:
        return ""
    words = Markup(text).striptags().split()
    if len(words) <= num_words:
        return " ".join(words)
    return " ".join(words[:num_words]) + more


class BlockRenderer:
    """
    Renders a :class:`~glimpse_block.query.PostListing` as block HTML.

    Output is autoescaped; display flags decide which parts of each post
    are emitted.
    """

    def __init__(
        self,
        settings: BlockSettings | None = None,
        templates_dir: Path = TEMPLATES_DIR,
    ) -> None:
        self.settings = settings or BlockSettings()
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "j2"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["trim_words"] = trim_words
        self._env.filters["safe_url"] = safe_url

    def render(self, listing: PostListing, display: DisplaySettings) -> str:
        if listing.is_empty:
            return self._env.get_template("no_posts.html.j2").render(
                message=self.settings.no_posts_message
            )
        html = self._env.get_template("posts.html.j2").render(
            items=listing.items,
            display=display,
            settings=self.settings,
        )
        logger.debug("Rendered %d posts", len(listing.items))
        return html
