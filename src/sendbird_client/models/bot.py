"""Bot (second-generation API) envelopes and the inbound callback payload."""

from pydantic import AliasChoices, Field

from sendbird_client.models.common import ApiTokenRequest, SendbirdRecord


class BotRequest(ApiTokenRequest):
    bot_userid: str
    bot_nickname: str = ""
    bot_callback_url: str = ""
    is_privacy_mode: bool = False


class BotUpdateRequest(ApiTokenRequest):
    bot_nickname: str = ""
    bot_callback_url: str = ""
    is_privacy_mode: bool = False


class BotMessageRequest(ApiTokenRequest):
    message: str = ""
    data: str = ""
    channel_url: str = ""


class Bot(SendbirdRecord):
    bot_token: str = ""
    bot_userid: str = ""
    bot_nickname: str = ""
    bot_callback_url: str = ""
    is_privacy_mode: bool = False


class BotUserId(SendbirdRecord):
    bot_userid: str = ""


class BotMessage(SendbirdRecord):
    bot_userid: str = ""
    message: str = ""
    data: str = ""
    channel_url: str = ""


class BotCallback(SendbirdRecord):
    """Notification Sendbird posts to a bot's callback URL.

    ``bot_token`` is the secret returned when the bot was created; it can be
    compared against the stored token to check the sender, but nothing in
    this package does so.
    """

    bot_userid: str = ""  # recipient bot
    category: str = Field(
        default="",
        validation_alias=AliasChoices("category", "bot_message_notification"),
    )
    ts: int = 0  # unix timestamp, usable for ordering
    bot_token: str = ""
    bot_nickname: str = ""
    sender_username: str = ""  # the sender's user id
    sender_nickname: str = ""
    message: str = ""
    data: str = ""
    mentioned: list[str] = []
    channel_type: str = ""  # "messaging" or "group_messaging"
    channel_url: str = ""
