"""Filter composition — block attributes to a bounded, ordered post query."""

from __future__ import annotations

from .adapter import IQueryAdapter, WordPressQueryAdapter
from .coercion import clamp, coerce_id, coerce_ids, coerce_limit
from .composer import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    FilterComposer,
    QueryDescriptorHook,
    compose,
)
from .configuration import DisplaySettings, FilterConfiguration
from .descriptor import OrderBy, OrderDirection, QueryDescriptor, ResultType
from .exceptions import AttributeValidationError

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "AttributeValidationError",
    "DisplaySettings",
    "FilterComposer",
    "FilterConfiguration",
    "IQueryAdapter",
    "OrderBy",
    "OrderDirection",
    "QueryDescriptor",
    "QueryDescriptorHook",
    "ResultType",
    "WordPressQueryAdapter",
    "clamp",
    "coerce_id",
    "coerce_ids",
    "coerce_limit",
    "compose",
]
