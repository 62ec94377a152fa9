"""Inbound bot webhook: payload decoding, routing and handler dispatch."""

from sendbird_client.webhook.dispatcher import CallbackDispatcher, MessageReceivedHandler
from sendbird_client.webhook.router import (
    DEFAULT_WEBHOOK_PATH,
    create_webhook_router,
    parse_callback,
    read_callback,
)

__all__ = [
    "CallbackDispatcher",
    "DEFAULT_WEBHOOK_PATH",
    "MessageReceivedHandler",
    "create_webhook_router",
    "parse_callback",
    "read_callback",
]
