"""Domain types: value objects, content items and terms."""

from __future__ import annotations

from .content import ContentItem, Taxonomy, Term
from .value_object import ValueObject

__all__ = ["ContentItem", "Taxonomy", "Term", "ValueObject"]
