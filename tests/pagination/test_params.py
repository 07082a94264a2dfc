"""Tests for list query parameter builders."""

from yextapi.pagination import (
    EntityListOptions,
    ListOptions,
    entity_list_options_params,
    list_options_params,
)


def test_unset_options_produce_no_params():
    assert list_options_params(None) == {}
    assert list_options_params(ListOptions()) == {}
    assert entity_list_options_params(None) == {}
    assert entity_list_options_params(EntityListOptions()) == {}


def test_list_options_params():
    opts = ListOptions(limit=50, offset=100, page_token="tok")

    assert list_options_params(opts) == {"limit": "50", "offset": "100", "pageToken": "tok"}


def test_entity_list_options_params():
    opts = EntityListOptions(limit=50, search_id="search-1", resolve_placeholders=True)

    assert entity_list_options_params(opts) == {
        "limit": "50",
        "searchId": "search-1",
        "resolvePlaceholders": "true",
    }
