"""Post block — listing service, rendering, editor data and registration."""

from __future__ import annotations

from .attributes import BLOCK_ATTRIBUTES, apply_defaults
from .editor import EDITOR_LABELS, EditorDataProvider
from .query import ListingStatus, PostListing, PostListingService
from .registration import (
    BlockType,
    BlockTypeRegistry,
    PostBlock,
    create_post_block,
    register_post_block,
)
from .rendering import BlockRenderer, safe_url, trim_words
from .settings import BLOCK_NAME, BlockSettings

__all__ = [
    "BLOCK_ATTRIBUTES",
    "BLOCK_NAME",
    "EDITOR_LABELS",
    "BlockRenderer",
    "BlockSettings",
    "BlockType",
    "BlockTypeRegistry",
    "EditorDataProvider",
    "ListingStatus",
    "PostBlock",
    "PostListing",
    "PostListingService",
    "apply_defaults",
    "create_post_block",
    "register_post_block",
    "safe_url",
    "trim_words",
]
