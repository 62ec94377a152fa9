"""Inbound bot callback endpoint.

Sendbird posts a JSON notification to the bot's callback URL whenever a
message is routed to the bot. The endpoint answers 200 as soon as the body
decodes, or 400 when it does not, and hands the payload to the dispatcher
in the background. No signature or bot_token check is made.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Request, Response
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from sendbird_client.errors import WebhookDecodeError
from sendbird_client.models.bot import BotCallback
from sendbird_client.webhook.dispatcher import CallbackDispatcher

logger = logging.getLogger(__name__)

DEFAULT_WEBHOOK_PATH = "/sendbird/bot"
WEBHOOK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def parse_callback(body: bytes) -> BotCallback:
    """Decode a callback body.

    Raises:
        WebhookDecodeError: the body is not a JSON object of the callback shape.
    """
    try:
        return BotCallback.model_validate_json(body)
    except ValidationError as exc:
        raise WebhookDecodeError(f"Couldn't parse Sendbird callback: {exc}") from exc


async def read_callback(request: Request) -> BotCallback:
    """Read the full request body and decode it."""
    try:
        body = await request.body()
    except ClientDisconnect as exc:
        raise WebhookDecodeError("Client disconnected before the body was read") from exc
    return parse_callback(body)


def create_webhook_router(
    dispatcher: CallbackDispatcher, path: str = DEFAULT_WEBHOOK_PATH
) -> APIRouter:
    """Build a router accepting any method on ``path`` for bot callbacks."""
    router = APIRouter(prefix="", tags=["sendbird"])

    @router.api_route(path, methods=WEBHOOK_METHODS)
    async def bot_callback(request: Request, background_tasks: BackgroundTasks) -> Response:
        """Acknowledge the callback and run the handler after responding."""
        try:
            callback = await read_callback(request)
        except WebhookDecodeError as exc:
            logger.warning("Rejected bot callback: %s", exc)
            return Response(status_code=400)

        if dispatcher.handler is not None:
            background_tasks.add_task(dispatcher.dispatch, callback)

        return Response(status_code=200)

    return router
