"""HTTP transport for the REST API.

Builds account-scoped URLs, signs every request with the API key and version,
unwraps the ``{"meta", "response"}`` envelope, and raises ``ApiError`` when the
server reports a failure. No retries: transport errors propagate unchanged.

Usage:
    from yextapi.client import Client
    from yextapi.config import ClientSettings

    with Client(ClientSettings(api_key="...")) as client:
        payload, response = client.do_request("GET", "customfields")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from yextapi.client.models import ApiError, Response, ResponseEnvelope
from yextapi.config import ClientSettings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _adapter(decode: Any) -> TypeAdapter[Any]:
    return TypeAdapter(decode)


class Client:
    """Synchronous API client over ``httpx``.

    Args:
        settings: Client configuration (loaded from ``YEXT_*`` env vars if None).
        http: Optional preconfigured ``httpx.Client``. When given, the caller
            keeps ownership and ``close()`` leaves it open.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=self._settings.timeout)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def url_for(self, path: str) -> str:
        """Absolute URL of an account-scoped resource path such as ``entities/123``."""
        base = self._settings.base_url.rstrip("/")
        return f"{base}/accounts/{self._settings.account_id}/{path.lstrip('/')}"

    def _auth_params(self) -> dict[str, str]:
        params = {"v": self._settings.version}
        if self._settings.api_key:
            params["api_key"] = self._settings.api_key
        return params

    def do_request(
        self,
        method: str,
        path: str,
        decode: Any = None,
        params: dict[str, str] | None = None,
    ) -> tuple[Any, Response]:
        """Perform a request without a body.

        Args:
            method: HTTP method.
            path: Resource path relative to the account.
            decode: Type to validate the ``response`` payload into (raw payload if None).
            params: Extra query parameters.

        Returns:
            Tuple of (decoded payload, transport metadata).

        Raises:
            ApiError: If the status is not 2xx or ``meta.errors`` is non-empty.
            httpx.HTTPError: On network failures.
            pydantic.ValidationError: If the payload does not match ``decode``.
        """
        return self._send(method, path, decode, params, None)

    def do_request_json(
        self,
        method: str,
        path: str,
        payload: Any,
        decode: Any = None,
        params: dict[str, str] | None = None,
    ) -> tuple[Any, Response]:
        """Perform a request carrying a JSON body. See ``do_request``."""
        return self._send(method, path, decode, params, payload)

    def _send(
        self,
        method: str,
        path: str,
        decode: Any,
        params: dict[str, str] | None,
        payload: Any,
    ) -> tuple[Any, Response]:
        url = self.url_for(path)
        query = {**self._auth_params(), **(params or {})}
        logger.debug("%s %s params=%s", method, url, params or {})

        if payload is None:
            http_response = self._http.request(method, url, params=query)
        else:
            http_response = self._http.request(method, url, params=query, json=payload)

        envelope = self._parse(http_response)
        response = Response(
            status_code=http_response.status_code,
            headers=dict(http_response.headers),
            meta=envelope.meta,
        )
        logger.debug("%s %s -> %d", method, url, response.status_code)

        if not http_response.is_success or envelope.meta.errors:
            raise ApiError(response, envelope.meta.errors)

        if decode is None:
            return envelope.response, response
        return _adapter(decode).validate_python(envelope.response), response

    @staticmethod
    def _parse(http_response: httpx.Response) -> ResponseEnvelope:
        """Decode the response envelope.

        Error responses whose body is not JSON, or not envelope-shaped, yield an
        empty envelope so the caller still gets an ``ApiError``.
        """
        if not http_response.content:
            return ResponseEnvelope()
        try:
            body = http_response.json()
        except ValueError:
            if http_response.is_success:
                raise
            return ResponseEnvelope()
        try:
            return ResponseEnvelope.model_validate(body)
        except ValidationError:
            if http_response.is_success:
                raise
            return ResponseEnvelope()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
