"""Primitives — exceptions shared by every glimpse package."""

from __future__ import annotations

from .exceptions import (
    BlockNotFoundError,
    BlockRegistrationError,
    ContentStoreError,
    GlimpseError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "BlockNotFoundError",
    "BlockRegistrationError",
    "ContentStoreError",
    "GlimpseError",
    "InfrastructureError",
    "NotFoundError",
    "ValidationError",
]
