"""Base model shared by the built-in entity variants.

Fields are declared snake_case and serialized camelCase, so a variant decodes
the wire record directly and dumps back to the same shape.
"""

from __future__ import annotations

from types import NoneType, UnionType
from typing import Any, ClassVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from pydantic.alias_generators import to_camel

_EMPTY_VALUES: dict[type, Any] = {str: "", int: 0, float: 0.0, bool: False}


def _empty_value(annotation: Any) -> Any:
    """Empty value for a field annotation such as ``str | None`` or ``list[str] | None``.

    Returns:
        Type-appropriate empty value, or None if the type has no obvious one.
    """
    if get_origin(annotation) in (Union, UnionType):
        args = [arg for arg in get_args(annotation) if arg is not NoneType]
        if len(args) != 1:
            return None
        annotation = args[0]

    origin = get_origin(annotation) or annotation
    if origin is list:
        return []
    if origin is dict:
        return {}
    if isinstance(origin, type) and issubclass(origin, BaseModel):
        return origin()
    return _EMPTY_VALUES.get(origin)


class ApiModel(BaseModel):
    """Pydantic base for wire objects: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump to the JSON shape the API expects, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EntityMeta(ApiModel):
    """Server-side metadata attached to every entity record."""

    id: str | None = None
    entity_type: str | None = None
    account_id: str | None = None
    uid: str | None = None
    folder_id: str | None = None
    labels: list[str] | None = None
    country_code: str | None = None
    language: str | None = None
    timestamp: str | None = None


class BaseEntity(ApiModel):
    """Common behaviour of entity variants.

    Optional fields are None when the server omitted them. After
    ``set_nil_is_empty(True)`` the accessors read those fields back as empty
    values instead, so callers see the same zero values whichever fields the
    server chose to send.
    """

    ENTITY_TYPE: ClassVar[str] = ""

    meta: EntityMeta = Field(default_factory=EntityMeta)

    _nil_is_empty: bool = PrivateAttr(default=False)

    def get_entity_type(self) -> str:
        return self.meta.entity_type or self.ENTITY_TYPE

    def get_entity_id(self) -> str:
        return self.meta.id or ""

    def set_nil_is_empty(self, nil_is_empty: bool) -> None:
        self._nil_is_empty = nil_is_empty

    def get_nil_is_empty(self) -> bool:
        return self._nil_is_empty

    def value_of(self, name: str) -> Any:
        """Read a field, honoring the nil-is-empty flag.

        Args:
            name: Python attribute name of the field.

        Returns:
            Field value, or its empty value if unset and the flag is on.
        """
        value = getattr(self, name)
        if value is None and self._nil_is_empty:
            return _empty_value(type(self).model_fields[name].annotation)
        return value


class Address(ApiModel):
    line1: str | None = None
    line2: str | None = None
    line3: str | None = None
    sublocality: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    extra_description: str | None = None
