"""Tests for the HTTP transport.

Focus: URL/auth wiring, envelope unwrapping, error surfacing, ownership of the
underlying httpx client.
"""

from unittest.mock import MagicMock

import httpx
import pytest
from conftest import envelope
from pydantic import ValidationError

from yextapi import ApiError, Client, ClientSettings, CustomField


def test_request_url_carries_account_version_and_key(make_client):
    """Every request is account-scoped and signed with key and version.

    Why: A missing api_key or v parameter is rejected by the server.
    """
    client, transport = make_client([httpx.Response(200, json=envelope({}))])

    client.do_request("GET", "customfields", params={"limit": "10"})

    url = transport.requests[0].url
    assert url.path == "/v2/accounts/12345/customfields"
    assert url.params["api_key"] == "test-key"
    assert url.params["v"] == "20240101"
    assert url.params["limit"] == "10"


def test_response_payload_is_unwrapped(make_client):
    client, _ = make_client([httpx.Response(200, json=envelope({"count": 1}))])

    payload, response = client.do_request("GET", "entities/x")

    assert payload == {"count": 1}
    assert response.status_code == 200
    assert response.meta.uuid == "req-1"


def test_decode_validates_into_type(make_client):
    body = envelope({"id": "1", "type": "TEXT", "name": "Notes"})
    client, _ = make_client([httpx.Response(200, json=body)])

    custom_field, _ = client.do_request("GET", "customfields/1", decode=CustomField)

    assert custom_field == CustomField(id="1", type="TEXT", name="Notes")


def test_decode_mismatch_propagates_validation_error(make_client):
    client, _ = make_client([httpx.Response(200, json=envelope({"name": "no type"}))])

    with pytest.raises(ValidationError):
        client.do_request("GET", "customfields/1", decode=CustomField)


def test_json_body_is_sent(make_client):
    client, transport = make_client([httpx.Response(201, json=envelope({"id": "9"}))])

    payload, response = client.do_request_json("POST", "customfields", {"name": "Notes"})

    assert transport.requests[0].method == "POST"
    assert transport.json_bodies() == [{"name": "Notes"}]
    assert payload == {"id": "9"}
    assert response.status_code == 201


def test_error_status_raises_api_error_with_details(make_client):
    """Server-reported errors surface with their codes and messages."""
    errors = [{"code": 2000, "type": "FATAL_ERROR", "message": "Entity not found"}]
    client, _ = make_client([httpx.Response(404, json=envelope(None, errors))])

    with pytest.raises(ApiError, match="Entity not found") as exc_info:
        client.do_request("GET", "entities/missing")

    assert exc_info.value.response.status_code == 404
    assert exc_info.value.errors[0].code == 2000


def test_meta_errors_on_success_status_raise(make_client):
    errors = [{"code": 1, "type": "FATAL_ERROR", "message": "bad"}]
    client, _ = make_client([httpx.Response(200, json=envelope({}, errors))])

    with pytest.raises(ApiError):
        client.do_request("GET", "entities")


def test_error_status_without_json_body_raises_api_error(make_client):
    client, _ = make_client([httpx.Response(502, text="<html>Bad Gateway</html>")])

    with pytest.raises(ApiError, match="502") as exc_info:
        client.do_request("GET", "entities")

    assert exc_info.value.errors == []


@pytest.mark.parametrize(
    ("status", "body"),
    [
        (502, "Bad Gateway"),
        (500, {"meta": {"errors": "boom"}}),
        (503, ["unavailable"]),
    ],
)
def test_error_status_with_unexpected_json_raises_api_error(make_client, status, body):
    """CRITICAL: Any non-2xx status raises ApiError, whatever the body shape.

    Why: Gateways and proxies answer with bodies the API never produces.
    """
    client, _ = make_client([httpx.Response(status, json=body)])

    with pytest.raises(ApiError, match=str(status)) as exc_info:
        client.do_request("GET", "entities")

    assert exc_info.value.errors == []


def test_success_status_with_unexpected_json_propagates(make_client):
    client, _ = make_client([httpx.Response(200, json={"meta": {"errors": "boom"}})])

    with pytest.raises(ValidationError):
        client.do_request("GET", "entities")


def test_transport_errors_propagate_unchanged(settings):
    """Network failures are not wrapped or retried."""

    def fail(request):
        raise httpx.ConnectError("refused", request=request)

    client = Client(settings, http=httpx.Client(transport=httpx.MockTransport(fail)))

    with pytest.raises(httpx.ConnectError):
        client.do_request("GET", "entities")


def test_empty_body_returns_none(make_client):
    client, _ = make_client([httpx.Response(204)])

    payload, response = client.do_request("DELETE", "customfields/1")

    assert payload is None
    assert response.status_code == 204


def test_api_key_omitted_when_unset():
    transport_calls = []

    def handler(request):
        transport_calls.append(request)
        return httpx.Response(200, json=envelope({}))

    client = Client(
        ClientSettings(api_key=None, account_id="me"),
        http=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    client.do_request("GET", "entities")

    assert "api_key" not in transport_calls[0].url.params
    assert transport_calls[0].url.path == "/v2/accounts/me/entities"


def test_close_leaves_injected_http_client_open(settings):
    http = MagicMock(spec=httpx.Client)

    with Client(settings, http=http):
        pass

    http.close.assert_not_called()


def test_close_owned_http_client(settings):
    client = Client(settings)

    client.close()

    assert client._http.is_closed
