"""Location entity variant (``entityType: "location"``)."""

from __future__ import annotations

from typing import ClassVar

from yextapi.entities.base import Address, ApiModel, BaseEntity

ENTITYTYPE_LOCATION = "location"


class Website(ApiModel):
    url: str | None = None
    display_url: str | None = None
    prefer_display_url: bool | None = None


class Coordinate(ApiModel):
    latitude: float | None = None
    longitude: float | None = None


class LocationEntity(BaseEntity):
    """A physical business location."""

    ENTITY_TYPE: ClassVar[str] = ENTITYTYPE_LOCATION

    name: str | None = None
    address: Address | None = None
    description: str | None = None
    closed: bool | None = None
    keywords: list[str] | None = None
    category_ids: list[str] | None = None
    emails: list[str] | None = None

    main_phone: str | None = None
    alternate_phone: str | None = None
    fax_phone: str | None = None
    local_phone: str | None = None
    mobile_phone: str | None = None
    tollfree_phone: str | None = None

    website_url: Website | None = None
    yext_display_coordinate: Coordinate | None = None

    def get_name(self) -> str | None:
        return self.value_of("name")

    def get_address(self) -> Address | None:
        return self.value_of("address")

    def get_description(self) -> str | None:
        return self.value_of("description")

    def get_closed(self) -> bool | None:
        return self.value_of("closed")

    def get_keywords(self) -> list[str] | None:
        return self.value_of("keywords")

    def get_category_ids(self) -> list[str] | None:
        return self.value_of("category_ids")

    def get_main_phone(self) -> str | None:
        return self.value_of("main_phone")
