"""Lenient coercion of attribute values into identifiers and limits.

Block attributes arrive as strings, numbers or lists of strings. Nothing
here raises: malformed input normalizes to zero, ``None`` or ``()`` so
that validation is left to the content store.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any


def coerce_id(value: Any) -> int:
    """Return ``value`` as a non-negative integer, ``0`` when invalid."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return 0
    elif not isinstance(value, int):
        return 0
    return value if value > 0 else 0


def coerce_ids(values: Any) -> tuple[int, ...]:
    """Coerce each identifier in a sequence.

    Invalid entries become ``0`` rather than being dropped, so a non-empty
    input stays non-empty; ``0`` matches no content. Order and duplicates
    are preserved. Anything that is not a list-like collection counts as
    "no identifiers".
    """
    if isinstance(values, (str, bytes, dict)) or not isinstance(values, Iterable):
        return ()
    return tuple(coerce_id(v) for v in values)


def coerce_limit(value: Any) -> int | None:
    """Return ``value`` as an integer, ``None`` when unset or unparseable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def clamp(value: int, lower: int, upper: int) -> int:
    """Bound ``value`` to ``[lower, upper]``."""
    return min(upper, max(lower, value))
