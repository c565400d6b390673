"""glimpse-core — Foundation package for the glimpse post block.

Content domain types, the content-store port and an in-memory adapter.
"""

from __future__ import annotations

from .adapters.memory import InMemoryContentStore
from .domain import ContentItem, Taxonomy, Term, ValueObject
from .ports import IContentQuery, IContentStore
from .primitives.exceptions import (
    BlockNotFoundError,
    BlockRegistrationError,
    ContentStoreError,
    GlimpseError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    # Domain
    "ContentItem",
    "Taxonomy",
    "Term",
    "ValueObject",
    # Ports
    "IContentQuery",
    "IContentStore",
    # Adapters
    "InMemoryContentStore",
    # Exceptions
    "BlockNotFoundError",
    "BlockRegistrationError",
    "ContentStoreError",
    "GlimpseError",
    "InfrastructureError",
    "NotFoundError",
    "ValidationError",
]
