"""Entity models: capability protocols and registry descriptors.

Capability protocols are interfaces that entity variants implement. Only
``Entity`` is required; ``SupportsNilNormalization`` is optional and checked
at runtime by the materializer.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pydantic import TypeAdapter


@runtime_checkable
class Entity(Protocol):
    """A typed entity that knows its own tag and identifier."""

    def get_entity_type(self) -> str: ...

    def get_entity_id(self) -> str: ...


@runtime_checkable
class SupportsNilNormalization(Protocol):
    """Entity that can read absent optional fields back as empty values."""

    def set_nil_is_empty(self, nil_is_empty: bool) -> None: ...

    def get_nil_is_empty(self) -> bool: ...


@dataclass(slots=True, frozen=True)
class EntityTypeMeta:
    """Registry descriptor for one entity variant.

    Attributes:
        tag: Type tag the variant is registered under.
        entity_type: Concrete class of the variant.
        factory: Zero-argument callable producing a fresh instance.
        adapter: Pydantic adapter used to decode JSON into the variant.
    """

    tag: str
    entity_type: type
    factory: Callable[[], Any]
    adapter: TypeAdapter[Any]
