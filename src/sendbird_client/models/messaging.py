"""Messaging (1-on-1 and group) channel envelopes."""

from pydantic import Field

from sendbird_client.models.common import AuthRequest, Member, SendbirdRecord


class MessagingChannelRequest(AuthRequest):
    name: str | None = None
    is_group: bool | None = None  # group chat when true, 1-on-1 otherwise
    cover_url: str | None = None
    data: str | None = None


class MessagingChannelUpdateRequest(MessagingChannelRequest):
    channel_url: str | None = None


class MessagingChannelInviteRequest(AuthRequest):
    channel_url: str
    user_ids: list[str] = []


class MessagingChannelHideRequest(AuthRequest):
    id: str = Field(serialization_alias="ids")  # user id, sent as "ids"
    channel_url: str


class MessagingChannelLeaveRequest(AuthRequest):
    channel_url: str
    user_ids: list[str] = []


class MessagingChannel(SendbirdRecord):
    channel_url: str = ""
    data: str = ""
    name: str = ""
    is_group: bool = False
    cover_url: str = ""


class MessagingChannelResponse(SendbirdRecord):
    """create/update answer with the channel nested under ``channel``."""

    channel: MessagingChannel = Field(default_factory=MessagingChannel)


class ChannelUrl(SendbirdRecord):
    channel_url: str = ""


class MessagingChannelUrl(SendbirdRecord):
    channel: ChannelUrl = Field(default_factory=ChannelUrl)


class MessagingChannelView(SendbirdRecord):
    channel_url: str = ""
    last_message: str = ""
    last_message_ts: int = 0
    created_at: int = 0
    members: list[Member] = []
