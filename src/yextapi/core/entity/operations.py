"""Pure functions turning raw JSON records into typed entities.

A record is materialized by reading its ``meta.entityType`` tag, resolving
the variant registered for that tag, and decoding the whole record into that
variant. Every failure raises; nothing falls back to a generic type.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from yextapi.core.entity.core import EntityRegistry
from yextapi.core.entity.models import Entity, SupportsNilNormalization

META_KEY = "meta"
ENTITY_TYPE_KEY = "entityType"


class MaterializationError(Exception):
    """Base class for records that cannot become typed entities.

    Attributes:
        record: The offending raw value.
    """

    def __init__(self, message: str, record: Any) -> None:
        super().__init__(message)
        self.record = record


class MalformedEntityError(MaterializationError):
    """Raised when a record (or its metadata) is not a mapping as expected."""

    pass


class MissingMetadataError(MaterializationError):
    """Raised when a record has no ``meta`` attribute."""

    pass


class MissingTypeTagError(MaterializationError):
    """Raised when a record's ``meta`` has no ``entityType`` attribute."""

    pass


class ReencodingError(MaterializationError):
    """Raised when a record cannot be decoded into its resolved variant.

    Attributes:
        tag: Type tag the record resolved to.
        error: Underlying serialization or validation failure.
    """

    def __init__(self, message: str, record: Any, tag: str, error: Exception) -> None:
        super().__init__(message, record)
        self.tag = tag
        self.error = error


def _extract_tag(record: Any) -> str:
    """Read ``meta.entityType`` from a raw record.

    Raises:
        MalformedEntityError: If record, meta or tag has the wrong shape.
        MissingMetadataError: If ``meta`` is absent.
        MissingTypeTagError: If ``meta.entityType`` is absent.
    """
    if not isinstance(record, Mapping):
        raise MalformedEntityError(
            f"Expected entity record to be an object, got {type(record).__name__}: {record!r}",
            record,
        )

    if META_KEY not in record:
        raise MissingMetadataError(f"Unable to find meta attribute in {record!r}", record)
    meta = record[META_KEY]
    if not isinstance(meta, Mapping):
        raise MalformedEntityError(
            f"Expected meta attribute to be an object, got {type(meta).__name__}: {meta!r}",
            record,
        )

    if ENTITY_TYPE_KEY not in meta:
        raise MissingTypeTagError(f"Unable to find entityType attribute in {meta!r}", record)
    tag = meta[ENTITY_TYPE_KEY]
    if not isinstance(tag, str):
        raise MalformedEntityError(f"Expected entityType to be a string, got {tag!r}", record)
    return tag


def set_nil_is_empty(entity: Any, nil_is_empty: bool = True) -> None:
    """Apply nil normalization if the entity supports it, otherwise do nothing.

    Args:
        entity: Entity instance of any variant.
        nil_is_empty: Flag value to set.
    """
    if isinstance(entity, SupportsNilNormalization):
        entity.set_nil_is_empty(nil_is_empty)


def get_nil_is_empty(entity: Any) -> bool:
    """Read the nil normalization flag, False for variants without it."""
    if isinstance(entity, SupportsNilNormalization):
        return entity.get_nil_is_empty()
    return False


def to_entity_type(record: Any, registry: EntityRegistry) -> Entity:
    """Materialize one raw record into its registered variant.

    Args:
        record: Decoded JSON value, expected to be an object with ``meta.entityType``.
        registry: Registry resolving tags to variants.

    Returns:
        New entity instance with nil normalization applied.

    Raises:
        MalformedEntityError: If the record is not an object.
        MissingMetadataError: If ``meta`` is absent.
        MissingTypeTagError: If ``meta.entityType`` is absent.
        UnknownTypeKindError: If the tag is not registered.
        ReencodingError: If the record does not fit the variant's schema.
    """
    tag = _extract_tag(record)
    meta = registry.resolve(tag)

    try:
        encoded = json.dumps(record)
    except (TypeError, ValueError) as e:
        raise ReencodingError(f"Marshaling entity to JSON: {e}", record, tag, e) from e

    try:
        entity = meta.adapter.validate_json(encoded)
    except ValidationError as e:
        raise ReencodingError(
            f"Unmarshaling entity JSON into {meta.entity_type.__name__}: {e}", record, tag, e
        ) from e

    set_nil_is_empty(entity)
    return entity  # type: ignore[no-any-return]


def to_entity_types(records: Sequence[Any], registry: EntityRegistry) -> list[Entity]:
    """Materialize records in order, stopping at the first failure.

    Args:
        records: Decoded JSON values.
        registry: Registry resolving tags to variants.

    Returns:
        Typed entities in input order.

    Raises:
        MaterializationError: First failing record's error, see ``to_entity_type``.
        UnknownTypeKindError: If a record's tag is not registered.
    """
    return [to_entity_type(record, registry) for record in records]
