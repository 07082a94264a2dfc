"""Pagination: list options, page results, and offset/token drivers."""

from yextapi.pagination.core import (
    iter_offset_pages,
    iter_token_pages,
    list_helper,
    token_list_helper,
)
from yextapi.pagination.models import EntityListOptions, ListOptions, Page, PageFetcher
from yextapi.pagination.params import entity_list_options_params, list_options_params

__all__ = [
    # Models
    "ListOptions",
    "EntityListOptions",
    "Page",
    "PageFetcher",
    # Drivers
    "list_helper",
    "token_list_helper",
    "iter_offset_pages",
    "iter_token_pages",
    # Query params
    "list_options_params",
    "entity_list_options_params",
]
