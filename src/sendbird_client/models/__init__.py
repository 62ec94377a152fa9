"""Request and response envelopes for the Sendbird platform API."""

from sendbird_client.models.admin import (
    AdminMessage,
    AdminMessageFile,
    AdminMessagingChannel,
    BroadcastMessageRequest,
    ChannelMemberCount,
    ConcurrentUserCount,
    DeletedMessage,
    MuteRequest,
    ReadMessagesRequest,
    UnmuteRequest,
)
from sendbird_client.models.bot import (
    Bot,
    BotCallback,
    BotMessage,
    BotMessageRequest,
    BotRequest,
    BotUpdateRequest,
    BotUserId,
)
from sendbird_client.models.chat import (
    ChatChannel,
    ChatChannelMessageRequest,
    ChatChannelRequest,
    ChatChannelUpdate,
    ChatChannelUpdateRequest,
    ChatChannelView,
)
from sendbird_client.models.common import (
    ApiTokenRequest,
    AuthRequest,
    ChannelMetadataRequest,
    ChannelSetMetacounterRequest,
    ChannelSetMetadataRequest,
    Member,
    MessageCount,
    SendbirdRecord,
)
from sendbird_client.models.messaging import (
    ChannelUrl,
    MessagingChannel,
    MessagingChannelHideRequest,
    MessagingChannelInviteRequest,
    MessagingChannelLeaveRequest,
    MessagingChannelRequest,
    MessagingChannelUpdateRequest,
    MessagingChannelUrl,
    MessagingChannelView,
)
from sendbird_client.models.user import BlockRequest, DeactivateRequest, User, UserRequest

__all__ = [
    "AdminMessage",
    "AdminMessageFile",
    "AdminMessagingChannel",
    "ApiTokenRequest",
    "AuthRequest",
    "BlockRequest",
    "Bot",
    "BotCallback",
    "BotMessage",
    "BotMessageRequest",
    "BotRequest",
    "BotUpdateRequest",
    "BotUserId",
    "BroadcastMessageRequest",
    "ChannelMemberCount",
    "ChannelMetadataRequest",
    "ChannelSetMetacounterRequest",
    "ChannelSetMetadataRequest",
    "ChannelUrl",
    "ChatChannel",
    "ChatChannelMessageRequest",
    "ChatChannelRequest",
    "ChatChannelUpdate",
    "ChatChannelUpdateRequest",
    "ChatChannelView",
    "ConcurrentUserCount",
    "DeactivateRequest",
    "DeletedMessage",
    "Member",
    "MessageCount",
    "MessagingChannel",
    "MessagingChannelHideRequest",
    "MessagingChannelInviteRequest",
    "MessagingChannelLeaveRequest",
    "MessagingChannelRequest",
    "MessagingChannelUpdateRequest",
    "MessagingChannelUrl",
    "MessagingChannelView",
    "MuteRequest",
    "ReadMessagesRequest",
    "SendbirdRecord",
    "UnmuteRequest",
    "User",
    "UserRequest",
]
