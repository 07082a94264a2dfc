"""Pagination models: list options and single-page results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ListOptions:
    """Page selection for list requests.

    Zero / empty values are left out of the request.
    """

    limit: int = 0
    """Maximum records per page."""

    offset: int = 0
    """Starting position, for offset-paginated resources."""

    page_token: str = ""
    """Continuation cursor, for token-paginated resources."""


@dataclass(frozen=True, slots=True)
class EntityListOptions(ListOptions):
    """List options accepted by the entities resource."""

    search_id: str = ""
    """Restrict results to a saved search."""

    resolve_placeholders: bool = False
    """Ask the server to substitute embedded field placeholders."""


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """Result of one single-page fetch.

    Attributes:
        count: Total number of records the server reports for the listing.
        items: Records on this page, in server order.
        page_token: Cursor for the next page; empty means no further pages.
    """

    count: int = 0
    items: list[T] = field(default_factory=list)
    page_token: str = ""


PageFetcher = Callable[[ListOptions], Page[T]]
"""Fetches the single page described by the given options."""
