"""Entity type registry.

Usage:
    registry = EntityRegistry()
    registry.register("location", LocationEntity)

    entity = registry.create("location")  # fresh LocationEntity()
    meta = registry.resolve("location")   # descriptor used by the materializer
"""

from __future__ import annotations

import warnings
from dataclasses import is_dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter

from yextapi.core.entity.models import EntityTypeMeta


class UnknownTypeKindError(LookupError):
    """Raised when a type tag has no registered entity variant."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown entity type: {tag!r}")
        self.tag = tag


class EntityRegistry:
    """Mapping from type tag to the entity variant that handles it.

    The registry stores classes, never instances, so every ``create`` call
    builds a new object that shares no state with earlier ones.
    """

    def __init__(self) -> None:
        """Initialize empty entity registry."""
        self._by_tag: dict[str, EntityTypeMeta] = {}

    def register(self, tag: str, source: type | Any) -> EntityTypeMeta:
        """Register an entity variant under a type tag.

        Registering a tag again replaces the previous variant.

        Args:
            tag: Type tag, as found in ``meta.entityType``.
            source: Variant class, or an instance whose class should be used.

        Returns:
            Descriptor for the registered variant.

        Raises:
            TypeError: If the class is neither a dataclass nor a Pydantic model.
        """
        cls = source if isinstance(source, type) else type(source)
        if not (is_dataclass(cls) or issubclass(cls, BaseModel)):
            raise TypeError(
                f"Entity {cls.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )

        previous = self._by_tag.get(tag)
        if previous is not None and previous.entity_type is not cls:
            warnings.warn(
                f"Entity type {tag!r} re-registered: {previous.entity_type.__name__} "
                f"replaced by {cls.__name__}.",
                stacklevel=2,
            )

        meta = EntityTypeMeta(tag=tag, entity_type=cls, factory=cls, adapter=TypeAdapter(cls))
        self._by_tag[tag] = meta
        return meta

    def resolve(self, tag: str) -> EntityTypeMeta:
        """Get the descriptor registered for a tag.

        Args:
            tag: Type tag to look up.

        Returns:
            Descriptor of the registered variant.

        Raises:
            UnknownTypeKindError: If the tag was never registered.
        """
        try:
            return self._by_tag[tag]
        except KeyError:
            raise UnknownTypeKindError(tag) from None

    def create(self, tag: str) -> Any:
        """Build a fresh, zero-valued instance of the variant for a tag.

        Args:
            tag: Type tag to instantiate.

        Returns:
            New instance, owned by the caller.

        Raises:
            UnknownTypeKindError: If the tag was never registered.
        """
        return self.resolve(tag).factory()

    def get_type(self, tag: str) -> type | None:
        """Get the variant class for a tag, or None if unregistered."""
        meta = self._by_tag.get(tag)
        return meta.entity_type if meta is not None else None

    def is_registered(self, tag: str) -> bool:
        """Check if a tag has a registered variant."""
        return tag in self._by_tag

    def tags(self) -> list[str]:
        """List registered tags in registration order."""
        return list(self._by_tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._by_tag

    def __len__(self) -> int:
        return len(self._by_tag)


def register_default_entities(registry: EntityRegistry) -> EntityRegistry:
    """Register the built-in location and event variants.

    Args:
        registry: Registry to populate.

    Returns:
        The same registry, for chaining.
    """
    # Built-in variants live outside core/
    from yextapi.entities import ENTITYTYPE_EVENT, ENTITYTYPE_LOCATION, Event, LocationEntity

    registry.register(ENTITYTYPE_LOCATION, LocationEntity)
    registry.register(ENTITYTYPE_EVENT, Event)
    return registry
