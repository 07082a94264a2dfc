"""Transport models: response envelope, metadata, and API errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One entry of ``meta.errors`` in an API response."""

    code: int = 0
    type: str = ""
    message: str = ""

    def __str__(self) -> str:
        return f"{self.type} {self.code}: {self.message}"


class ResponseMeta(BaseModel):
    """The ``meta`` half of every API response body."""

    uuid: str = ""
    errors: list[ErrorDetail] = Field(default_factory=list)


class ResponseEnvelope(BaseModel):
    """Full API response body: ``{"meta": {...}, "response": <payload>}``."""

    meta: ResponseMeta = Field(default_factory=ResponseMeta)
    response: Any = None


@dataclass(slots=True)
class Response:
    """Transport-level metadata of one HTTP exchange.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers.
        meta: Decoded ``meta`` object of the response body.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    meta: ResponseMeta = field(default_factory=ResponseMeta)


class ApiError(Exception):
    """Raised when the server rejects a request.

    Attributes:
        response: Transport metadata of the failed exchange.
        errors: Error entries reported in ``meta.errors`` (may be empty).
    """

    def __init__(self, response: Response, errors: list[ErrorDetail] | None = None) -> None:
        self.response = response
        self.errors = errors or []
        detail = "; ".join(str(e) for e in self.errors) or "no error details"
        super().__init__(f"API request failed with status {response.status_code}: {detail}")
