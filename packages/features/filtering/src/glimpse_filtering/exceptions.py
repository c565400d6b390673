"""Filtering package exceptions."""

from __future__ import annotations

from glimpse_core.primitives.exceptions import ValidationError


class AttributeValidationError(ValidationError):
    """Raised when block attributes carry values of the wrong shape."""
