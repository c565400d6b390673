"""Adapters implementing glimpse_core ports."""

from __future__ import annotations

from .memory import InMemoryContentStore

__all__ = ["InMemoryContentStore"]
