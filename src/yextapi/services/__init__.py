"""Resource services: entities and custom fields."""

from yextapi.services.customfield import (
    CUSTOM_FIELD_LIST_MAX_LIMIT,
    CUSTOM_FIELD_PATH,
    CustomFieldService,
)
from yextapi.services.entity import ENTITY_LIST_MAX_LIMIT, ENTITY_PATH, EntityService
from yextapi.services.models import CustomFieldListResponse, EntityListResponse, payload_of

__all__ = [
    # Services
    "EntityService",
    "CustomFieldService",
    # Constants
    "ENTITY_PATH",
    "ENTITY_LIST_MAX_LIMIT",
    "CUSTOM_FIELD_PATH",
    "CUSTOM_FIELD_LIST_MAX_LIMIT",
    # Wire models
    "EntityListResponse",
    "CustomFieldListResponse",
    "payload_of",
]
