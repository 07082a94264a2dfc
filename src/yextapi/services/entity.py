"""Entities resource: list, get, create, edit, delete.

Usage:
    service = EntityService(client)
    service.register_entity("healthcareProfessional", HealthcareProfessional)

    everything = service.list_all()
    location, _ = service.get("store-1")
"""

from __future__ import annotations

from dataclasses import replace
from typing import cast
from urllib.parse import quote

from yextapi.client import Client, Response
from yextapi.core.entity import (
    Entity,
    EntityRegistry,
    EntityTypeMeta,
    register_default_entities,
    to_entity_type,
    to_entity_types,
)
from yextapi.pagination import (
    EntityListOptions,
    ListOptions,
    Page,
    entity_list_options_params,
    token_list_helper,
)
from yextapi.services.models import EntityListResponse, payload_of

ENTITY_PATH = "entities"
ENTITY_LIST_MAX_LIMIT = 50


def _entity_path(entity_id: str) -> str:
    return f"{ENTITY_PATH}/{quote(entity_id, safe='')}"


class EntityService:
    """Operations on the polymorphic entities resource.

    Records are materialized into the variant registered for their
    ``meta.entityType``. A new service registers the built-in location and
    event variants; a registry passed in is used as-is.

    Args:
        client: Transport used for every request.
        registry: Optional preconfigured registry.
    """

    def __init__(self, client: Client, registry: EntityRegistry | None = None) -> None:
        self._client = client
        if registry is None:
            self.register_default_entities()
        else:
            self._registry = registry

    @property
    def registry(self) -> EntityRegistry:
        return self._registry

    def register_default_entities(self) -> None:
        """Reset the registry to the built-in variants only."""
        self._registry = register_default_entities(EntityRegistry())

    def register_entity(self, tag: str, source: type | object) -> EntityTypeMeta:
        """Register (or replace) the variant used for a type tag."""
        return self._registry.register(tag, source)

    def create_entity(self, tag: str) -> object:
        """Build a fresh, empty instance of the variant registered for a tag."""
        return self._registry.create(tag)

    def list(self, opts: EntityListOptions | None = None) -> tuple[Page[Entity], Response]:
        """Fetch one page of entities.

        Args:
            opts: Paging, saved search and placeholder options.

        Returns:
            Tuple of (page of typed entities, transport metadata).

        Raises:
            MaterializationError: If a record cannot be materialized.
            UnknownTypeKindError: If a record's type tag is not registered.
        """
        body, response = self._client.do_request(
            "GET",
            ENTITY_PATH,
            decode=EntityListResponse,
            params=entity_list_options_params(opts),
        )
        entities = to_entity_types(body.entities, self._registry)
        return Page(count=body.count, items=entities, page_token=body.page_token or ""), response

    def list_all(self, opts: EntityListOptions | None = None) -> list[Entity]:
        """Fetch every entity by following page tokens.

        The page size is always ``ENTITY_LIST_MAX_LIMIT``; search and
        placeholder options in ``opts`` are kept.
        """
        opts = replace(
            opts or EntityListOptions(), limit=ENTITY_LIST_MAX_LIMIT, offset=0, page_token=""
        )

        def fetch(page_opts: ListOptions) -> Page[Entity]:
            page, _ = self.list(cast(EntityListOptions, page_opts))
            return page

        return token_list_helper(fetch, opts)

    def get(self, entity_id: str) -> tuple[Entity, Response]:
        """Fetch and materialize a single entity."""
        body, response = self._client.do_request("GET", _entity_path(entity_id))
        return to_entity_type(body, self._registry), response

    def create(self, entity: Entity) -> Response:
        """Create an entity. Its type tag is sent as the ``entityType`` query param."""
        _, response = self._client.do_request_json(
            "POST",
            ENTITY_PATH,
            payload_of(entity),
            params={"entityType": entity.get_entity_type()},
        )
        return response

    def edit(self, entity: Entity) -> Response:
        """Update an existing entity addressed by its ``meta.id``.

        Raises:
            ValueError: If the entity has no identifier.
        """
        entity_id = entity.get_entity_id()
        if not entity_id:
            raise ValueError("Cannot edit an entity without meta.id")
        payload = payload_of(entity)
        _, response = self._client.do_request_json("PUT", _entity_path(entity_id), payload)
        return response

    def delete(self, entity_id: str) -> Response:
        """Delete an entity by identifier."""
        _, response = self._client.do_request("DELETE", _entity_path(entity_id))
        return response
