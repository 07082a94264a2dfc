"""Query parameter builders for list requests."""

from __future__ import annotations

from yextapi.pagination.models import EntityListOptions, ListOptions


def list_options_params(opts: ListOptions | None) -> dict[str, str]:
    """Build ``limit``/``offset``/``pageToken`` query params, skipping unset values."""
    params: dict[str, str] = {}
    if opts is None:
        return params
    if opts.limit:
        params["limit"] = str(opts.limit)
    if opts.offset:
        params["offset"] = str(opts.offset)
    if opts.page_token:
        params["pageToken"] = opts.page_token
    return params


def entity_list_options_params(opts: EntityListOptions | None) -> dict[str, str]:
    """Build entity list query params: paging plus ``searchId``/``resolvePlaceholders``."""
    params = list_options_params(opts)
    if opts is None:
        return params
    if opts.search_id:
        params["searchId"] = opts.search_id
    if opts.resolve_placeholders:
        params["resolvePlaceholders"] = "true"
    return params
