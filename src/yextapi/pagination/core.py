"""Pagination drivers.

Both drivers call a single-page fetcher repeatedly until the server signals
the end of the listing, and keep records in server order.

Usage:
    def fetch(opts: ListOptions) -> Page[CustomField]:
        ...

    fields = list_helper(fetch, ListOptions(limit=1000))
    entities = token_list_helper(fetch_entities, EntityListOptions(limit=50))
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from typing import TypeVar

from yextapi.pagination.models import ListOptions, Page, PageFetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


def iter_offset_pages(fetch_page: PageFetcher[T], opts: ListOptions) -> Iterator[Page[T]]:
    """Walk an offset/limit listing page by page.

    Stops after a page that is empty, shorter than ``opts.limit``, or brings
    the number of retrieved records up to the server-reported count.

    Args:
        fetch_page: Fetches one page for the given options.
        opts: Page size and starting offset. The limit stays fixed throughout.

    Returns:
        Iterator over the fetched pages.

    Raises:
        ValueError: If ``opts.limit`` is not positive.
    """
    if opts.limit <= 0:
        raise ValueError(f"Offset pagination requires a positive limit, got {opts.limit}")
    return _offset_pages(fetch_page, opts)


def _offset_pages(fetch_page: PageFetcher[T], opts: ListOptions) -> Iterator[Page[T]]:
    offset = opts.offset
    retrieved = 0
    while True:
        page = fetch_page(replace(opts, offset=offset))
        retrieved += len(page.items)
        logger.debug(
            "Fetched %d records at offset %d (%d of %d)",
            len(page.items),
            offset,
            retrieved,
            page.count,
        )
        yield page

        if not page.items or len(page.items) < opts.limit or retrieved >= page.count:
            return
        offset += opts.limit


def iter_token_pages(fetch_page: PageFetcher[T], opts: ListOptions) -> Iterator[Page[T]]:
    """Walk a page-token listing page by page.

    Starts from ``opts.page_token`` (normally empty) and stops after the
    first page whose returned token is empty.

    Args:
        fetch_page: Fetches one page for the given options.
        opts: Page size and initial token. The limit stays fixed throughout.

    Yields:
        Fetched pages in server order.
    """
    token = opts.page_token
    while True:
        page = fetch_page(replace(opts, page_token=token))
        logger.debug("Fetched %d records, next page token %r", len(page.items), page.page_token)
        yield page

        if not page.page_token:
            return
        token = page.page_token


def list_helper(fetch_page: PageFetcher[T], opts: ListOptions) -> list[T]:
    """Fetch every record of an offset/limit listing.

    Any fetch error aborts the walk and propagates; no partial list is returned.

    Args:
        fetch_page: Fetches one page for the given options.
        opts: Page size and starting offset.

    Returns:
        All records, concatenated in page order.

    Raises:
        ValueError: If ``opts.limit`` is not positive.
    """
    return [item for page in iter_offset_pages(fetch_page, opts) for item in page.items]


def token_list_helper(fetch_page: PageFetcher[T], opts: ListOptions) -> list[T]:
    """Fetch every record of a page-token listing.

    Any fetch error aborts the walk and propagates; no partial list is returned.

    Args:
        fetch_page: Fetches one page for the given options.
        opts: Page size and initial token.

    Returns:
        All records, concatenated in page order.
    """
    return [item for page in iter_token_pages(fetch_page, opts) for item in page.items]
