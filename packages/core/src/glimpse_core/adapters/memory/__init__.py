"""In-memory adapters for testing and embedding."""

from __future__ import annotations

from .content_store import InMemoryContentStore

__all__ = ["InMemoryContentStore"]
