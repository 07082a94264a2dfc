"""Wire models for list responses and write-payload serialization."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, TypeAdapter, field_validator

from yextapi.entities import ApiModel, CustomField


class EntityListResponse(ApiModel):
    """One page of the entities listing, records still untyped."""

    count: int = 0
    entities: list[Any] = Field(default_factory=list)
    page_token: str | None = None

    @field_validator("entities", mode="before")
    @classmethod
    def null_entities_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CustomFieldListResponse(ApiModel):
    """One page of the custom fields listing."""

    count: int = 0
    custom_fields: list[CustomField] = Field(default_factory=list)

    @field_validator("custom_fields", mode="before")
    @classmethod
    def null_custom_fields_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


@lru_cache(maxsize=64)
def _adapter(cls: type) -> TypeAdapter[Any]:
    return TypeAdapter(cls)


def payload_of(obj: Any) -> dict[str, Any]:
    """Serialize a model or dataclass to a JSON-ready dict with wire aliases.

    Fields left as None are omitted, so the server keeps their current values.
    """
    return _adapter(type(obj)).dump_python(  # type: ignore[no-any-return]
        obj, mode="json", by_alias=True, exclude_none=True
    )
