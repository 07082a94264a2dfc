"""Custom field definitions (the ``customfields`` resource)."""

from __future__ import annotations

from yextapi.entities.base import ApiModel

CUSTOMFIELDTYPE_TEXT = "TEXT"
CUSTOMFIELDTYPE_MULTILINE_TEXT = "MULTILINE_TEXT"
CUSTOMFIELDTYPE_BOOLEAN = "BOOLEAN"
CUSTOMFIELDTYPE_NUMBER = "NUMBER"
CUSTOMFIELDTYPE_DATE = "DATE"
CUSTOMFIELDTYPE_URL = "URL"
CUSTOMFIELDTYPE_SINGLE_OPTION = "SINGLE_OPTION"
CUSTOMFIELDTYPE_MULTI_OPTION = "MULTI_OPTION"
CUSTOMFIELDTYPE_PHOTO = "PHOTO"
CUSTOMFIELDTYPE_GALLERY = "GALLERY"


class CustomFieldOption(ApiModel):
    """One choice of a SINGLE_OPTION or MULTI_OPTION field."""

    key: str | None = None
    value: str


class CustomField(ApiModel):
    """Definition of an account-level custom field.

    ``id`` is assigned by the server and ``type`` cannot change after
    creation; the service strips them from write payloads accordingly.
    """

    id: str | None = None
    type: str
    name: str
    options: list[CustomFieldOption] | None = None
    group: str | None = None
    description: str | None = None
    alternate_hashtags: list[str] | None = None
    entity_availability: list[str] | None = None

    def get_id(self) -> str:
        return self.id or ""
