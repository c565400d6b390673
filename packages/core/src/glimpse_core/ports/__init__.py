"""Ports — protocols implemented by infrastructure adapters."""

from __future__ import annotations

from .content_store import IContentQuery, IContentStore

__all__ = ["IContentQuery", "IContentStore"]
