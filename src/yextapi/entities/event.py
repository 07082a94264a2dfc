"""Event entity variant (``entityType: "event"``)."""

from __future__ import annotations

from typing import ClassVar

from yextapi.entities.base import Address, ApiModel, BaseEntity

ENTITYTYPE_EVENT = "event"


class EventTime(ApiModel):
    """Start and end as local ISO-8601 datetimes, e.g. ``2019-01-31T17:00``."""

    start: str | None = None
    end: str | None = None


class Event(BaseEntity):
    """A scheduled event, optionally tied to a location entity."""

    ENTITY_TYPE: ClassVar[str] = ENTITYTYPE_EVENT

    name: str | None = None
    description: str | None = None
    timezone: str | None = None
    time: EventTime | None = None
    address: Address | None = None
    linked_location: str | None = None
    ticket_url: str | None = None
    is_free_event: bool | None = None
    keywords: list[str] | None = None

    def get_name(self) -> str | None:
        return self.value_of("name")

    def get_description(self) -> str | None:
        return self.value_of("description")

    def get_timezone(self) -> str | None:
        return self.value_of("timezone")

    def get_time(self) -> EventTime | None:
        return self.value_of("time")
