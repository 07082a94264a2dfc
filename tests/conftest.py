"""Shared test fixtures."""

import json
import sys
from collections.abc import Callable
from typing import Any

import httpx
import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from yextapi import Client, ClientSettings, EntityRegistry, register_default_entities


@pytest.fixture
def registry():
    """Registry holding the built-in location and event variants."""
    return register_default_entities(EntityRegistry())


@pytest.fixture
def settings():
    return ClientSettings(
        api_key="test-key",
        account_id="12345",
        base_url="https://api.example.com/v2",
        version="20240101",
    )


def location_record(entity_id: str = "loc-1", **fields: Any) -> dict[str, Any]:
    """Raw wire record for a location entity."""
    return {"meta": {"id": entity_id, "entityType": "location"}, **fields}


def event_record(entity_id: str = "evt-1", **fields: Any) -> dict[str, Any]:
    """Raw wire record for an event entity."""
    return {"meta": {"id": entity_id, "entityType": "event"}, **fields}


def envelope(response: Any = None, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """Wrap a payload in the API response envelope."""
    return {"meta": {"uuid": "req-1", "errors": errors or []}, "response": response}


class RecordingTransport:
    """Serves canned responses in order and records every request it receives."""

    def __init__(self, responses: list[httpx.Response]) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)

    def json_bodies(self) -> list[Any]:
        return [json.loads(r.content) if r.content else None for r in self.requests]


@pytest.fixture
def make_client(settings) -> Callable[[list[httpx.Response]], tuple[Client, RecordingTransport]]:
    """Build a Client whose HTTP traffic is served by a RecordingTransport."""

    def factory(responses: list[httpx.Response]) -> tuple[Client, RecordingTransport]:
        transport = RecordingTransport(responses)
        http = httpx.Client(transport=httpx.MockTransport(transport))
        return Client(settings, http=http), transport

    return factory
