"""FilterConfiguration — block attributes as an immutable filter configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from glimpse_core.domain.value_object import ValueObject

from .coercion import coerce_id, coerce_ids, coerce_limit
from .exceptions import AttributeValidationError

DEFAULT_BUTTON_TEXT = "Read More"


class DisplaySettings(ValueObject):
    """Presentation flags carried alongside the filters.

    They never influence query composition; the renderer reads them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    show_title: bool = Field(default=True, alias="showTitle")
    show_image: bool = Field(default=True, alias="showImage")
    show_excerpt: bool = Field(default=True, alias="showExcerpt")
    title_link: bool = Field(default=True, alias="titleLink")
    button_link: bool = Field(default=False, alias="buttonLink")
    button_text: str = Field(default=DEFAULT_BUTTON_TEXT, alias="buttonText")
    class_name: str = Field(default="", alias="className")

    @field_validator("button_text", "class_name", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class FilterConfiguration(ValueObject):
    """
    What the editor asked for: category, tags, an explicit post selection
    and how many posts to show.

    Identifiers are normalized on construction (see
    :mod:`glimpse_filtering.coercion`); ``limit`` stays unbounded here and
    is clamped by the composer.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    category_id: int | None = Field(default=None, alias="category")
    tag_ids: tuple[int, ...] = Field(default=(), alias="tags")
    explicit_post_ids: tuple[int, ...] = Field(default=(), alias="specificPosts")
    limit: int | None = Field(default=None, alias="numberOfPosts")
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @field_validator("category_id", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> int | None:
        return coerce_id(value) or None

    @field_validator("tag_ids", "explicit_post_ids", mode="before")
    @classmethod
    def _coerce_id_list(cls, value: Any) -> tuple[int, ...]:
        return coerce_ids(value)

    @field_validator("limit", mode="before")
    @classmethod
    def _coerce_limit(cls, value: Any) -> int | None:
        return coerce_limit(value)

    @property
    def has_explicit_selection(self) -> bool:
        return bool(self.explicit_post_ids)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> FilterConfiguration:
        """Build a configuration from a flat block attribute dictionary.

        Display flags are read from the same dictionary. Filter fields never
        fail; a display flag of the wrong shape raises
        :class:`AttributeValidationError`.
        """
        data = dict(attributes)
        data["display"] = {k: v for k, v in data.items() if k != "display"}
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                errors.setdefault(loc, []).append(error.get("msg", "invalid value"))
            raise AttributeValidationError(errors) from exc
