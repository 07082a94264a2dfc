"""Core type definitions for yextapi."""

from typing import Any, TypeAlias

EntityTypeTag: TypeAlias = str
"""Discriminator string selecting a concrete entity variant (``meta.entityType``)."""

RawRecord: TypeAlias = dict[str, Any]
"""Untyped entity record exactly as decoded from the wire.

Key order is preserved. A record must carry ``meta.entityType`` before it can
be materialized into a typed entity.
"""
