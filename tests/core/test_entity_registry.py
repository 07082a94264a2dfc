"""Tests for the entity type registry.

Critical Invariants:
- create() never hands out shared or aliased instances
- Unregistered tags fail loudly, never fall back to a generic type
- Later registrations for a tag replace earlier ones
"""

from dataclasses import dataclass, field

import pytest

from yextapi import ENTITYTYPE_EVENT, ENTITYTYPE_LOCATION, Event, LocationEntity
from yextapi.core.entity import EntityRegistry, UnknownTypeKindError, register_default_entities


@dataclass
class Doctor:
    meta: dict = field(default_factory=dict)
    specialties: list[str] = field(default_factory=list)


def test_defaults_register_location_and_event():
    """Built-in variants are available without caller setup."""
    registry = register_default_entities(EntityRegistry())

    assert registry.tags() == [ENTITYTYPE_LOCATION, ENTITYTYPE_EVENT]
    assert registry.get_type(ENTITYTYPE_LOCATION) is LocationEntity
    assert registry.get_type(ENTITYTYPE_EVENT) is Event


@pytest.mark.parametrize("tag", [ENTITYTYPE_LOCATION, ENTITYTYPE_EVENT])
def test_create_returns_independent_instances(registry, tag):
    """CRITICAL: Two create() calls share no mutable state.

    Why: A shared prototype would leak one entity's fields into the next.
    """
    first = registry.create(tag)
    second = registry.create(tag)

    assert first is not second
    assert first.meta is not second.meta

    first.meta.id = "changed"
    first.keywords = ["a"]

    assert second.meta.id is None
    assert second.keywords is None


def test_create_with_dataclass_variant_is_independent(registry):
    """Dataclass variants get fresh default_factory state per instance."""
    registry.register("doctor", Doctor)

    first = registry.create("doctor")
    second = registry.create("doctor")
    first.specialties.append("cardiology")

    assert second.specialties == []


def test_create_unknown_tag_raises():
    """CRITICAL: Unregistered tag raises UnknownTypeKindError, no default instance.

    Why: Silently degrading to a generic type hides schema drift.
    """
    registry = EntityRegistry()

    with pytest.raises(UnknownTypeKindError, match="healthcareProfessional") as exc_info:
        registry.create("healthcareProfessional")

    assert exc_info.value.tag == "healthcareProfessional"
    assert isinstance(exc_info.value, LookupError)


def test_register_instance_stores_its_class_not_the_instance(registry):
    """Registering an instance never makes that instance reachable via create()."""
    prototype = Doctor(specialties=["surgery"])
    registry.register("doctor", prototype)

    created = registry.create("doctor")

    assert created is not prototype
    assert created.specialties == []


def test_reregistering_tag_last_write_wins(registry):
    """Re-registering replaces the variant and warns about the replacement."""

    class StoreLocation(LocationEntity):
        pass

    with pytest.warns(UserWarning, match="re-registered"):
        registry.register(ENTITYTYPE_LOCATION, StoreLocation)

    assert registry.get_type(ENTITYTYPE_LOCATION) is StoreLocation
    assert isinstance(registry.create(ENTITYTYPE_LOCATION), StoreLocation)


def test_register_requires_dataclass_or_pydantic():
    """Plain classes cannot be decoded from JSON and are rejected up front."""
    registry = EntityRegistry()

    class NotAModel:
        pass

    with pytest.raises(TypeError, match="must be a dataclass or Pydantic model"):
        registry.register("thing", NotAModel)


def test_resolve_and_membership(registry):
    meta = registry.resolve(ENTITYTYPE_EVENT)

    assert meta.tag == ENTITYTYPE_EVENT
    assert meta.entity_type is Event
    assert ENTITYTYPE_EVENT in registry
    assert "unknown" not in registry
    assert registry.is_registered(ENTITYTYPE_LOCATION)
    assert registry.get_type("unknown") is None
    assert len(registry) == 2
