"""Built-in entity variants and resource models.

Usage:
    from yextapi.entities import EntityMeta, LocationEntity

    location = LocationEntity(name="Main St", meta=EntityMeta(id="store-1"))
    location.to_payload()  # {"meta": {"id": "store-1"}, "name": "Main St"}
"""

from yextapi.entities.base import Address, ApiModel, BaseEntity, EntityMeta
from yextapi.entities.customfield import (
    CUSTOMFIELDTYPE_BOOLEAN,
    CUSTOMFIELDTYPE_DATE,
    CUSTOMFIELDTYPE_GALLERY,
    CUSTOMFIELDTYPE_MULTI_OPTION,
    CUSTOMFIELDTYPE_MULTILINE_TEXT,
    CUSTOMFIELDTYPE_NUMBER,
    CUSTOMFIELDTYPE_PHOTO,
    CUSTOMFIELDTYPE_SINGLE_OPTION,
    CUSTOMFIELDTYPE_TEXT,
    CUSTOMFIELDTYPE_URL,
    CustomField,
    CustomFieldOption,
)
from yextapi.entities.event import ENTITYTYPE_EVENT, Event, EventTime
from yextapi.entities.location import ENTITYTYPE_LOCATION, Coordinate, LocationEntity, Website

__all__ = [
    # Base
    "ApiModel",
    "BaseEntity",
    "EntityMeta",
    "Address",
    # Location
    "ENTITYTYPE_LOCATION",
    "LocationEntity",
    "Website",
    "Coordinate",
    # Event
    "ENTITYTYPE_EVENT",
    "Event",
    "EventTime",
    # Custom fields
    "CustomField",
    "CustomFieldOption",
    "CUSTOMFIELDTYPE_TEXT",
    "CUSTOMFIELDTYPE_MULTILINE_TEXT",
    "CUSTOMFIELDTYPE_BOOLEAN",
    "CUSTOMFIELDTYPE_NUMBER",
    "CUSTOMFIELDTYPE_DATE",
    "CUSTOMFIELDTYPE_URL",
    "CUSTOMFIELDTYPE_SINGLE_OPTION",
    "CUSTOMFIELDTYPE_MULTI_OPTION",
    "CUSTOMFIELDTYPE_PHOTO",
    "CUSTOMFIELDTYPE_GALLERY",
]
