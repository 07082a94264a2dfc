"""HTTP transport collaborator: client, response metadata, and API errors."""

from yextapi.client.models import ApiError, ErrorDetail, Response, ResponseEnvelope, ResponseMeta
from yextapi.client.transport import Client

__all__ = [
    "Client",
    "Response",
    "ResponseMeta",
    "ResponseEnvelope",
    "ErrorDetail",
    "ApiError",
]
