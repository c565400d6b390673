"""Exception hierarchy for the glimpse post block toolkit."""

from __future__ import annotations


class GlimpseError(Exception):
    """Root exception for every glimpse package."""


class ValidationError(GlimpseError):
    """Raised when caller-supplied data cannot be accepted.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class NotFoundError(GlimpseError):
    """Raised when a named resource is not found."""


class BlockNotFoundError(NotFoundError):
    """Raised when no block type is registered under a name."""

    def __init__(self, block_name: str) -> None:
        self.block_name = block_name
        super().__init__(f"Block type {block_name!r} is not registered")


class BlockRegistrationError(GlimpseError):
    """Raised when a block type conflicts with an existing registration."""


class InfrastructureError(GlimpseError):
    """Base class for all infrastructure-related errors."""


class ContentStoreError(InfrastructureError):
    """Raised when the content store cannot answer a query."""
