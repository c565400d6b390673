"""IQueryAdapter — protocol for backend-specific translation of a descriptor."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .descriptor import OrderBy, QueryDescriptor


@runtime_checkable
class IQueryAdapter(Protocol):
    """Translate a query descriptor to a backend-native query.

    Examples include ``WP_Query`` arguments or SQL ``WHERE`` constructs.
    """

    def to_backend_query(self, descriptor: QueryDescriptor) -> Any:
        """Return backend-native query structure."""
        ...


class WordPressQueryAdapter:
    """Map a descriptor 1:1 onto ``WP_Query`` arguments."""

    def to_backend_query(self, descriptor: QueryDescriptor) -> dict[str, Any]:
        args: dict[str, Any] = {
            "post_type": descriptor.result_type.post_type,
            "post_status": descriptor.result_type.post_status,
            "posts_per_page": descriptor.limit,
            "orderby": "post__in" if descriptor.order_by is OrderBy.EXPLICIT else "date",
            "order": descriptor.order_direction.value.upper(),
        }
        if descriptor.category_filter:
            args["cat"] = descriptor.category_filter
        if descriptor.tag_filter:
            args["tag__in"] = list(descriptor.tag_filter)
        if descriptor.id_filter:
            args["post__in"] = list(descriptor.id_filter)
        return args
