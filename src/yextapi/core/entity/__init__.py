"""Entity functionality: capability protocols, type registry, and materialization."""

from yextapi.core.entity.core import (
    EntityRegistry,
    UnknownTypeKindError,
    register_default_entities,
)
from yextapi.core.entity.models import Entity, EntityTypeMeta, SupportsNilNormalization
from yextapi.core.entity.operations import (
    MalformedEntityError,
    MaterializationError,
    MissingMetadataError,
    MissingTypeTagError,
    ReencodingError,
    get_nil_is_empty,
    set_nil_is_empty,
    to_entity_type,
    to_entity_types,
)

__all__ = [
    # Models
    "Entity",
    "EntityTypeMeta",
    "SupportsNilNormalization",
    # Registry
    "EntityRegistry",
    "UnknownTypeKindError",
    "register_default_entities",
    # Materialization
    "to_entity_type",
    "to_entity_types",
    "set_nil_is_empty",
    "get_nil_is_empty",
    "MaterializationError",
    "MalformedEntityError",
    "MissingMetadataError",
    "MissingTypeTagError",
    "ReencodingError",
]
