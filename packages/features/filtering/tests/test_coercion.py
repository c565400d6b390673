"""Tests for attribute coercion helpers."""

from __future__ import annotations

import pytest

from glimpse_filtering.coercion import clamp, coerce_id, coerce_ids, coerce_limit


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, 3),
        ("3", 3),
        (" 12 ", 12),
        (7.9, 7),
        (0, 0),
        (-4, 0),
        ("-4", 0),
        ("abc", 0),
        ("", 0),
        (None, 0),
        (True, 0),
        (float("nan"), 0),
        ([3], 0),
    ],
)
def test_coerce_id(value: object, expected: int) -> None:
    assert coerce_id(value) == expected


def test_coerce_ids_preserves_order_and_maps_invalid_to_zero() -> None:
    assert coerce_ids(["10", "2", "x", "-1", "5", "2"]) == (10, 2, 0, 0, 5, 2)


@pytest.mark.parametrize("value", [None, "", "7", 7, {"a": 1}])
def test_coerce_ids_non_sequences_are_empty(value: object) -> None:
    assert coerce_ids(value) == ()


def test_coerce_limit() -> None:
    assert coerce_limit("8") == 8
    assert coerce_limit(50) == 50
    assert coerce_limit(-3) == -3
    assert coerce_limit(None) is None
    assert coerce_limit("many") is None
    assert coerce_limit(float("inf")) is None


def test_clamp() -> None:
    assert clamp(0, 1, 20) == 1
    assert clamp(999, 1, 20) == 20
    assert clamp(7, 1, 20) == 7
