"""Block attribute schema and default filling."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from glimpse_filtering.configuration import DEFAULT_BUTTON_TEXT

BLOCK_ATTRIBUTES: dict[str, dict[str, Any]] = {
    "category": {"type": "string", "default": ""},
    "tags": {"type": "array", "default": [], "items": {"type": "string"}},
    "numberOfPosts": {"type": "number", "default": 5},
    "specificPosts": {"type": "array", "default": [], "items": {"type": "string"}},
    "showTitle": {"type": "boolean", "default": True},
    "showImage": {"type": "boolean", "default": True},
    "showExcerpt": {"type": "boolean", "default": True},
    "titleLink": {"type": "boolean", "default": True},
    "buttonLink": {"type": "boolean", "default": False},
    "buttonText": {"type": "string", "default": DEFAULT_BUTTON_TEXT},
    "className": {"type": "string", "default": ""},
}


def apply_defaults(
    attributes: Mapping[str, Any] | None,
    schema: Mapping[str, Mapping[str, Any]] = BLOCK_ATTRIBUTES,
) -> dict[str, Any]:
    """Return ``attributes`` with every missing schema key set to its default.

    Unknown keys are kept. Mutable defaults are copied per call.
    """
    result = dict(attributes or {})
    for name, definition in schema.items():
        if name not in result and "default" in definition:
            result[name] = copy.deepcopy(definition["default"])
    return result
