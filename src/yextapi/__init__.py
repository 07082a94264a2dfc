"""yextapi: client for the entities and custom fields REST resources.

Usage:
    from yextapi import Client, ClientSettings, EntityService, LocationEntity

    client = Client(ClientSettings(api_key="...", account_id="me"))
    entities = EntityService(client)

    for entity in entities.list_all():
        if isinstance(entity, LocationEntity):
            print(entity.get_entity_id(), entity.get_name())
"""

__version__ = "0.1.0"

# Transport
from yextapi.client import ApiError, Client, ErrorDetail, Response, ResponseMeta

# Configuration
from yextapi.config import ClientSettings

# Core primitives
from yextapi.core import (
    Entity,
    EntityRegistry,
    EntityTypeTag,
    MalformedEntityError,
    MaterializationError,
    MissingMetadataError,
    MissingTypeTagError,
    RawRecord,
    ReencodingError,
    SupportsNilNormalization,
    UnknownTypeKindError,
    register_default_entities,
    to_entity_type,
    to_entity_types,
)

# Built-in variants
from yextapi.entities import (
    ENTITYTYPE_EVENT,
    ENTITYTYPE_LOCATION,
    BaseEntity,
    CustomField,
    CustomFieldOption,
    EntityMeta,
    Event,
    LocationEntity,
)

# Pagination
from yextapi.pagination import (
    EntityListOptions,
    ListOptions,
    Page,
    list_helper,
    token_list_helper,
)

# Resources
from yextapi.services import CustomFieldService, EntityService

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityTypeTag",
    "RawRecord",
    "Entity",
    "SupportsNilNormalization",
    "EntityRegistry",
    "register_default_entities",
    "to_entity_type",
    "to_entity_types",
    "MaterializationError",
    "MalformedEntityError",
    "MissingMetadataError",
    "MissingTypeTagError",
    "ReencodingError",
    "UnknownTypeKindError",
    # Entities
    "BaseEntity",
    "EntityMeta",
    "LocationEntity",
    "Event",
    "ENTITYTYPE_LOCATION",
    "ENTITYTYPE_EVENT",
    "CustomField",
    "CustomFieldOption",
    # Pagination
    "ListOptions",
    "EntityListOptions",
    "Page",
    "list_helper",
    "token_list_helper",
    # Transport
    "Client",
    "ClientSettings",
    "Response",
    "ResponseMeta",
    "ErrorDetail",
    "ApiError",
    # Services
    "EntityService",
    "CustomFieldService",
]
