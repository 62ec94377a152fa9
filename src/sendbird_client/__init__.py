"""Sendbird platform API client and bot webhook."""

from sendbird_client.client import (
    CONTENT_TYPE,
    SendbirdClient,
    check_response,
    get_client,
    reset_client,
)
from sendbird_client.config import DEFAULT_BASE_URL, Settings, get_settings
from sendbird_client.errors import (
    DecodeError,
    MalformedRequestError,
    NotFoundError,
    SendbirdError,
    ServiceError,
    TransportError,
    WebhookDecodeError,
)
from sendbird_client.response import APIResponse

__all__ = [
    "APIResponse",
    "CONTENT_TYPE",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "MalformedRequestError",
    "NotFoundError",
    "SendbirdClient",
    "SendbirdError",
    "ServiceError",
    "Settings",
    "TransportError",
    "WebhookDecodeError",
    "check_response",
    "get_client",
    "get_settings",
    "reset_client",
]
