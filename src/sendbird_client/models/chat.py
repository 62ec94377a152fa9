"""Open chat channel envelopes.

The service reports a channel's cover image as ``cover_url`` on some endpoints
and ``cover_image_url`` on others. Every decoded channel record mirrors the
two fields so callers can always read ``cover_url``.
"""

from pydantic import model_validator

from sendbird_client.models.common import AuthRequest, Member, SendbirdRecord


class ChatChannelRequest(AuthRequest):
    channel_url: str | None = None
    name: str | None = None  # topic
    cover_url: str | None = None
    data: str | None = None  # custom channel data


class ChatChannelUpdateRequest(ChatChannelRequest):
    target_channel_url: str | None = None
    ops: list[str] | None = None  # operator user ids


class ChatChannelMessageRequest(AuthRequest):
    id: str  # sender user id
    channel_url: str | None = None
    message: str = ""
    data: str = ""


class ChatChannel(SendbirdRecord):
    id: int = 0
    name: str = ""
    channel_url: str = ""
    member_count: int = 0
    cover_url: str = ""
    cover_image_url: str = ""
    data: str = ""
    created_at: int = 0  # epoch milliseconds

    @model_validator(mode="after")
    def _mirror_cover_url(self) -> "ChatChannel":
        cover = self.cover_image_url or self.cover_url
        self.cover_url = cover
        self.cover_image_url = cover
        return self


class ChatChannelUpdate(ChatChannel):
    ops: list[str] = []


class ChatChannelView(ChatChannel):
    members: list[Member] = []
