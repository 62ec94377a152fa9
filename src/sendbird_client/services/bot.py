"""Bot endpoints (``v2/bots``) and inbound bot message registration.

The bot API authenticates with ``api_token``: reads put it in the query
string, writes put it in the JSON body.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from fastapi import APIRouter

from sendbird_client.auth import api_token_query, with_api_token
from sendbird_client.models.bot import (
    Bot,
    BotCallback,
    BotMessage,
    BotMessageRequest,
    BotRequest,
    BotUpdateRequest,
    BotUserId,
)
from sendbird_client.models.common import ApiTokenRequest
from sendbird_client.response import APIResponse
from sendbird_client.services.base import BaseService
from sendbird_client.webhook.dispatcher import CallbackDispatcher
from sendbird_client.webhook.router import DEFAULT_WEBHOOK_PATH, create_webhook_router

if TYPE_CHECKING:
    from sendbird_client.client import SendbirdClient


def _bot_path(bot_user_id: str, suffix: str = "") -> str:
    return f"v2/bots/{quote(bot_user_id, safe='')}{suffix}"


class BotService(BaseService):
    def __init__(self, client: "SendbirdClient", max_concurrency: int = 0) -> None:
        super().__init__(client)
        self.dispatcher = CallbackDispatcher(max_concurrency=max_concurrency)

    def create(self, params: BotRequest) -> APIResponse[Bot]:
        return self._call("POST", "v2/bots", with_api_token(params, self._client), Bot)

    def send_message(
        self, bot_user_id: str, params: BotMessageRequest
    ) -> APIResponse[BotMessage]:
        """Send a message to a channel as the bot."""
        return self._call(
            "POST",
            _bot_path(bot_user_id, "/send"),
            with_api_token(params, self._client),
            BotMessage,
        )

    def list(self) -> APIResponse[list[Bot]]:
        """All bots in the application."""
        return self._call(
            "GET", "v2/bots", destination=list[Bot], params=api_token_query(self._client)
        )

    def get(self, bot_user_id: str) -> APIResponse[Bot]:
        return self._call(
            "GET", _bot_path(bot_user_id), destination=Bot, params=api_token_query(self._client)
        )

    def update(self, bot_user_id: str, params: BotUpdateRequest) -> APIResponse[Bot]:
        return self._call(
            "POST", _bot_path(bot_user_id), with_api_token(params, self._client), Bot
        )

    def delete(self, bot_user_id: str) -> APIResponse[BotUserId]:
        params = with_api_token(ApiTokenRequest(), self._client)
        return self._call("DELETE", _bot_path(bot_user_id), params, BotUserId)

    def on_message_received(
        self, handler: Callable[[BotCallback], Any]
    ) -> Callable[[BotCallback], Any]:
        """Register the handler for inbound bot callbacks. Usable as a decorator.

        The handler may be a plain function (run in a worker thread) or a
        coroutine function. It runs after the webhook has answered.
        """
        self.dispatcher.register(handler)
        return handler

    def webhook_router(self, path: str = DEFAULT_WEBHOOK_PATH) -> APIRouter:
        """FastAPI router serving this bot's callback endpoint at ``path``."""
        return create_webhook_router(self.dispatcher, path)
