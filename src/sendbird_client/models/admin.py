"""Admin envelopes."""

from pydantic import AliasChoices, Field

from sendbird_client.models.common import AuthRequest, Member, SendbirdRecord


class BroadcastMessageRequest(AuthRequest):
    """Admin message broadcast. Not available on the Free and Sprout plans."""

    channel_urls: list[str] | None = Field(default=None, serialization_alias="channel_url")
    message: str | None = None
    persistent: bool | None = None  # save the message when true
    data: str | None = None


class ReadMessagesRequest(AuthRequest):
    """Either ``channel_url`` or ``target_user_ids`` must be set."""

    channel_url: str | None = None
    target_user_ids: list[str] | None = None
    limit: int = 50
    message_id: int = 0  # read messages before this id; 0 reads from the latest


class DeleteMessageRequest(AuthRequest):
    msg_id: str


class UserIdRequest(AuthRequest):
    id: str


class MuteRequest(AuthRequest):
    id: str  # user id
    channel_urls: list[str] = []
    is_soft_mute: bool = False  # soft mute delivers muted messages to a client callback


class UnmuteRequest(AuthRequest):
    id: str
    channel_urls: list[str] = []


class MuteListRequest(AuthRequest):
    channel_urls: list[str] = []


class AdminMessageFile(SendbirdRecord):
    url: str = ""
    custom: str = ""
    type: str = ""
    name: str = ""
    size: int = 0


class AdminMessage(SendbirdRecord):
    id: str = ""  # sender id
    # the service spells this key "nickanme"
    nickname: str = Field(default="", validation_alias=AliasChoices("nickanme", "nickname"))
    message_id: int = 0
    timestamp: int = 0  # epoch milliseconds
    message: str = ""
    file: AdminMessageFile = Field(default_factory=AdminMessageFile)  # empty for text messages


class DeletedMessage(SendbirdRecord):
    app_id: int = 0
    msg_id: int = 0


class AdminMessagingChannel(SendbirdRecord):
    channel_url: str = ""
    unread_message_count: int = 0
    last_message: str = ""
    last_message_ts: int = 0  # 0 when there is no last message
    members: list[Member] = []


class ConcurrentUserCount(SendbirdRecord):
    count: int = 0


class ChannelMemberCount(SendbirdRecord):
    accumulated_member_count: int = 0  # joined at least once
    online_member_count: int = 0
    member_count: int = 0
