"""Block type registry and the composition root for the post block."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from glimpse_core.primitives.exceptions import (
    BlockNotFoundError,
    BlockRegistrationError,
)
from glimpse_filtering.composer import FilterComposer
from glimpse_filtering.configuration import FilterConfiguration

from .attributes import BLOCK_ATTRIBUTES, apply_defaults
from .query import PostListingService
from .rendering import BlockRenderer
from .settings import BlockSettings

if TYPE_CHECKING:
    from glimpse_core.ports.content_store import IContentStore
    from glimpse_filtering.composer import QueryDescriptorHook

logger = logging.getLogger(__name__)

RenderCallback = Callable[[dict[str, Any]], str]


@dataclass(frozen=True)
class BlockType:
    """A named, dynamically rendered block."""

    name: str
    render_callback: RenderCallback
    attributes: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: dict(BLOCK_ATTRIBUTES)
    )

    def render(self, attributes: Mapping[str, Any] | None = None) -> str:
        """Fill attribute defaults, then call the render callback."""
        return self.render_callback(apply_defaults(attributes, self.attributes))


class BlockTypeRegistry:
    """Store of block types, keyed by name.

    Registering the same block twice is a no-op; registering a different
    block under a taken name raises ``BlockRegistrationError``.
    """

    def __init__(self) -> None:
        self._blocks: dict[str, BlockType] = {}

    def register(self, block: BlockType) -> BlockType:
        existing = self._blocks.get(block.name)
        if existing is not None and existing is not block:
            raise BlockRegistrationError(
                f"Block type {block.name!r} is already registered"
            )
        self._blocks[block.name] = block
        logger.debug("Registered block type %s", block.name)
        return block

    def get(self, name: str) -> BlockType:
        try:
            return self._blocks[name]
        except KeyError:
            raise BlockNotFoundError(name) from None

    def render(self, name: str, attributes: Mapping[str, Any] | None = None) -> str:
        return self.get(name).render(attributes)

    def names(self) -> list[str]:
        return sorted(self._blocks)

    def __contains__(self, name: object) -> bool:
        return name in self._blocks


class PostBlock:
    """Render callback of the post block: attributes in, HTML out."""

    def __init__(
        self,
        listing_service: PostListingService,
        renderer: BlockRenderer,
    ) -> None:
        self.listing_service = listing_service
        self.renderer = renderer

    def __call__(self, attributes: dict[str, Any]) -> str:
        config = FilterConfiguration.from_attributes(attributes)
        listing = self.listing_service.list_posts(config)
        return self.renderer.render(listing, config.display)


def create_post_block(
    store: IContentStore,
    *,
    hook: QueryDescriptorHook | None = None,
    settings: BlockSettings | None = None,
) -> BlockType:
    """Wire composer, listing service and renderer into a block type."""
    settings = settings or BlockSettings()
    composer = FilterComposer(hook=hook, **settings.composer_kwargs())
    callback = PostBlock(
        PostListingService(composer, store),
        BlockRenderer(settings),
    )
    return BlockType(name=settings.block_name, render_callback=callback)


def register_post_block(
    registry: BlockTypeRegistry,
    store: IContentStore,
    *,
    hook: QueryDescriptorHook | None = None,
    settings: BlockSettings | None = None,
) -> BlockType:
    """Create the post block and register it in ``registry``."""
    return registry.register(create_post_block(store, hook=hook, settings=settings))
