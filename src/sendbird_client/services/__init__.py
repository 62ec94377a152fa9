"""Resource handles, one per Sendbird API family."""

from sendbird_client.services.admin import AdminService
from sendbird_client.services.base import BaseService
from sendbird_client.services.bot import BotService
from sendbird_client.services.chat import ChatChannelService
from sendbird_client.services.messaging import MessagingChannelService
from sendbird_client.services.users import UserService

__all__ = [
    "AdminService",
    "BaseService",
    "BotService",
    "ChatChannelService",
    "MessagingChannelService",
    "UserService",
]
