"""Core functionalities: stateless protocols, registry, and materialization.

Architecture Note:
    core/ contains the pieces that know nothing about HTTP. Resource services
    in services/ feed wire records through these functions.
"""

from yextapi.core.entity import (
    Entity,
    EntityRegistry,
    EntityTypeMeta,
    MalformedEntityError,
    MaterializationError,
    MissingMetadataError,
    MissingTypeTagError,
    ReencodingError,
    SupportsNilNormalization,
    UnknownTypeKindError,
    get_nil_is_empty,
    register_default_entities,
    set_nil_is_empty,
    to_entity_type,
    to_entity_types,
)
from yextapi.core.types import EntityTypeTag, RawRecord

__all__ = [
    # Types
    "EntityTypeTag",
    "RawRecord",
    # Entity
    "Entity",
    "EntityTypeMeta",
    "SupportsNilNormalization",
    "EntityRegistry",
    "UnknownTypeKindError",
    "register_default_entities",
    "to_entity_type",
    "to_entity_types",
    "set_nil_is_empty",
    "get_nil_is_empty",
    # Errors
    "MaterializationError",
    "MalformedEntityError",
    "MissingMetadataError",
    "MissingTypeTagError",
    "ReencodingError",
]
