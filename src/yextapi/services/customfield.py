"""Custom fields resource: list, get, create, edit, delete."""

from __future__ import annotations

from urllib.parse import quote

from yextapi.client import Client, Response
from yextapi.entities import CustomField
from yextapi.pagination import ListOptions, Page, list_helper, list_options_params
from yextapi.services.models import CustomFieldListResponse, payload_of

CUSTOM_FIELD_PATH = "customfields"
CUSTOM_FIELD_LIST_MAX_LIMIT = 1000

# Server-assigned on create; immutable on update
_CREATE_FORBIDDEN = ("id",)
_EDIT_FORBIDDEN = ("id", "type")


def _custom_field_path(custom_field_id: str) -> str:
    return f"{CUSTOM_FIELD_PATH}/{quote(custom_field_id, safe='')}"


class CustomFieldService:
    """Operations on account custom field definitions.

    Args:
        client: Transport used for every request.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def list(self, opts: ListOptions | None = None) -> tuple[Page[CustomField], Response]:
        """Fetch one page of custom fields."""
        body, response = self._client.do_request(
            "GET",
            CUSTOM_FIELD_PATH,
            decode=CustomFieldListResponse,
            params=list_options_params(opts),
        )
        return Page(count=body.count, items=body.custom_fields), response

    def list_all(self) -> list[CustomField]:
        """Fetch every custom field, ``CUSTOM_FIELD_LIST_MAX_LIMIT`` per page."""

        def fetch(page_opts: ListOptions) -> Page[CustomField]:
            page, _ = self.list(page_opts)
            return page

        return list_helper(fetch, ListOptions(limit=CUSTOM_FIELD_LIST_MAX_LIMIT))

    def get(self, custom_field_id: str) -> tuple[CustomField, Response]:
        """Fetch a single custom field definition."""
        return self._client.do_request(  # type: ignore[no-any-return]
            "GET", _custom_field_path(custom_field_id), decode=CustomField
        )

    def create(self, cf: CustomField) -> Response:
        """Create a custom field. Any ``id`` on the model is not sent."""
        payload = payload_of(cf)
        for key in _CREATE_FORBIDDEN:
            payload.pop(key, None)
        _, response = self._client.do_request_json("POST", CUSTOM_FIELD_PATH, payload)
        return response

    def edit(self, cf: CustomField) -> Response:
        """Update a custom field addressed by its ``id``. ``id`` and ``type`` are not sent.

        Raises:
            ValueError: If the custom field has no identifier.
        """
        if not cf.get_id():
            raise ValueError("Cannot edit a custom field without id")
        payload = payload_of(cf)
        for key in _EDIT_FORBIDDEN:
            payload.pop(key, None)
        _, response = self._client.do_request_json("PUT", _custom_field_path(cf.get_id()), payload)
        return response

    def delete(self, custom_field_id: str) -> Response:
        """Delete a custom field by identifier."""
        _, response = self._client.do_request("DELETE", _custom_field_path(custom_field_id))
        return response
