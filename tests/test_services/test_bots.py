"""Tests for the second-generation bot endpoints against the fake service."""

import httpx
import pytest

from sendbird_client.client import SendbirdClient
from sendbird_client.errors import ServiceError
from sendbird_client.models.bot import (
    Bot,
    BotMessage,
    BotMessageRequest,
    BotRequest,
    BotUpdateRequest,
    BotUserId,
)

BOT_JSON = {
    "bot_token": "bot_token_1",
    "bot_userid": "bot_1",
    "bot_nickname": "Helper",
    "bot_callback_url": "https://example.com/sendbird/bot",
    "is_privacy_mode": False,
}


def _require_api_token(body):
    """Answer with ``body`` only when the query carries a non-empty api_token."""

    def handler(request: httpx.Request) -> httpx.Response:
        if not request.url.params.get("api_token"):
            return httpx.Response(401, json={"message": "Invalid API Token", "code": 400401})
        return httpx.Response(200, json=body)

    return handler


def test_create(client: SendbirdClient, fake):
    fake.add("POST", "/v2/bots", BOT_JSON)
    params = BotRequest(
        bot_userid="bot_1",
        bot_nickname="Helper",
        bot_callback_url="https://example.com/sendbird/bot",
    )

    bot = client.bot.create(params).data

    assert fake.last_json() == {
        "api_token": "API_TOKEN_1",
        "bot_userid": "bot_1",
        "bot_nickname": "Helper",
        "bot_callback_url": "https://example.com/sendbird/bot",
        "is_privacy_mode": False,
    }
    assert bot == Bot(**BOT_JSON)


def test_list_sends_token_in_query(client: SendbirdClient, fake):
    second = {**BOT_JSON, "bot_userid": "bot_2", "bot_token": "bot_token_2"}
    fake.add_handler("GET", "/v2/bots", _require_api_token([BOT_JSON, second]))

    bots = client.bot.list().data

    request = fake.last_request
    assert request.method == "GET"
    assert request.url.params["api_token"] == "API_TOKEN_1"
    assert [bot.bot_userid for bot in bots] == ["bot_1", "bot_2"]


def test_list_without_token_is_service_error(fake):
    http = httpx.Client(transport=httpx.MockTransport(fake))
    fake.add_handler("GET", "/v2/bots", _require_api_token([]))
    unauthenticated = SendbirdClient(
        "SENDBIRD_APP_ID", "", http_client=http, base_url="https://api.sendbird.test"
    )

    with pytest.raises(ServiceError) as exc_info:
        unauthenticated.bot.list()

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid API Token"
    assert exc_info.value.code == 400401
    http.close()


def test_get(client: SendbirdClient, fake):
    fake.add_handler("GET", "/v2/bots/bot_1", _require_api_token(BOT_JSON))
    assert client.bot.get("bot_1").data.bot_nickname == "Helper"


def test_get_percent_encodes_id(client: SendbirdClient, fake):
    fake.add("GET", "/v2/bots/team/bot", BOT_JSON)
    client.bot.get("team/bot")
    assert fake.last_request.url.raw_path.startswith(b"/v2/bots/team%2Fbot")


def test_send_message(client: SendbirdClient, fake):
    fake.add(
        "POST",
        "/v2/bots/bot_1/send",
        {"bot_userid": "bot_1", "message": "hi", "channel_url": "c1"},
    )

    sent = client.bot.send_message("bot_1", BotMessageRequest(message="hi", channel_url="c1")).data

    assert fake.last_json() == {
        "api_token": "API_TOKEN_1",
        "message": "hi",
        "data": "",
        "channel_url": "c1",
    }
    assert sent == BotMessage(bot_userid="bot_1", message="hi", channel_url="c1")


def test_update_posts_to_bot_path(client: SendbirdClient, fake):
    fake.add("POST", "/v2/bots/bot_1", {**BOT_JSON, "bot_nickname": "Renamed"})

    bot = client.bot.update("bot_1", BotUpdateRequest(bot_nickname="Renamed")).data

    assert fake.last_json()["api_token"] == "API_TOKEN_1"
    assert fake.last_json()["bot_nickname"] == "Renamed"
    assert bot.bot_nickname == "Renamed"


def test_delete_sends_token_in_body(client: SendbirdClient, fake):
    fake.add("DELETE", "/v2/bots/bot_1", {"bot_userid": "bot_1"})

    response = client.bot.delete("bot_1")

    assert fake.last_request.method == "DELETE"
    assert fake.last_json() == {"api_token": "API_TOKEN_1"}
    assert response.data == BotUserId(bot_userid="bot_1")


def test_on_message_received_is_a_decorator(client: SendbirdClient):
    @client.bot.on_message_received
    def handle(callback):
        return callback

    assert client.bot.dispatcher.handler is handle
