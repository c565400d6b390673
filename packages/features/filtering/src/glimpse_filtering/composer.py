"""FilterComposer — FilterConfiguration -> QueryDescriptor with filter precedence."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .coercion import clamp
from .configuration import FilterConfiguration
from .descriptor import OrderBy, OrderDirection, QueryDescriptor

QueryDescriptorHook = Callable[[QueryDescriptor, FilterConfiguration], QueryDescriptor]

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
MIN_LIMIT = 1
MAX_LIMIT = 20


class FilterComposer:
    """Builds the query descriptor for a post list.

    Precedence is fixed: an explicit post selection replaces any category
    or tag filter and switches to explicit ordering. Category and tag
    filters otherwise combine, newest posts first.
    """

    def __init__(
        self,
        *,
        hook: QueryDescriptorHook | None = None,
        default_limit: int = DEFAULT_LIMIT,
        min_limit: int = MIN_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        """
        Initialize FilterComposer.

        Args:
            hook: Optional ``(descriptor, config) -> descriptor`` callable
                applied once to every composed descriptor. Its return value
                is the final descriptor.
            default_limit: Limit used when the configuration sets none.
            min_limit: Lower bound for the limit.
            max_limit: Upper bound for the limit.
        """
        if min_limit < 1 or max_limit < min_limit:
            raise ValueError(
                f"Invalid limit bounds: min_limit={min_limit}, max_limit={max_limit}"
            )
        self._hook = hook
        self._default_limit = default_limit
        self._min_limit = min_limit
        self._max_limit = max_limit

    @property
    def hook(self) -> QueryDescriptorHook | None:
        return self._hook

    def compose(self, config: FilterConfiguration) -> QueryDescriptor:
        """Return the descriptor for ``config``. Never raises for any configuration."""
        limit = self._default_limit if config.limit is None else config.limit
        descriptor = QueryDescriptor(
            limit=clamp(limit, self._min_limit, self._max_limit),
            order_by=OrderBy.DATE,
            order_direction=OrderDirection.DESC,
        )

        if config.category_id:
            descriptor = replace(descriptor, category_filter=config.category_id)

        if config.tag_ids:
            descriptor = replace(descriptor, tag_filter=tuple(config.tag_ids))

        if config.explicit_post_ids:
            # Explicit selection wins over category and tags.
            descriptor = replace(
                descriptor,
                id_filter=tuple(config.explicit_post_ids),
                order_by=OrderBy.EXPLICIT,
                category_filter=None,
                tag_filter=None,
            )

        logger.debug("Composed post query %s", descriptor)
        if self._hook is None:
            return descriptor
        final = self._hook(descriptor, config)
        if final != descriptor:
            logger.debug("Post query overridden by hook: %s", final)
        return final


def compose(
    config: FilterConfiguration,
    hook: QueryDescriptorHook | None = None,
) -> QueryDescriptor:
    """Compose ``config`` with the default limits."""
    return FilterComposer(hook=hook).compose(config)

