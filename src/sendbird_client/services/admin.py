"""Admin endpoints (``admin/*``)."""

from sendbird_client.auth import with_auth
from sendbird_client.models.admin import (
    AdminMessage,
    AdminMessagingChannel,
    BroadcastMessageRequest,
    ChannelMemberCount,
    ConcurrentUserCount,
    DeletedMessage,
    DeleteMessageRequest,
    MuteListRequest,
    MuteRequest,
    ReadMessagesRequest,
    UnmuteRequest,
    UserIdRequest,
)
from sendbird_client.models.common import AuthRequest, ChannelUrlRequest
from sendbird_client.response import APIResponse
from sendbird_client.services.base import BaseService


class AdminService(BaseService):
    def broadcast_message(self, params: BroadcastMessageRequest) -> APIResponse[None]:
        """Broadcast an admin message to the given channels."""
        return self._call("POST", "admin/broadcast_message", with_auth(params, self._client))

    def read_messages(self, params: ReadMessagesRequest) -> APIResponse[list[AdminMessage]]:
        return self._call(
            "POST", "admin/read_messages", with_auth(params, self._client), list[AdminMessage]
        )

    def delete_message(self, message_id: str) -> APIResponse[DeletedMessage]:
        params = with_auth(DeleteMessageRequest(msg_id=message_id), self._client)
        return self._call("POST", "admin/delete_message", params, DeletedMessage)

    def list_messaging_channels(self, user_id: str) -> APIResponse[list[AdminMessagingChannel]]:
        params = with_auth(UserIdRequest(id=user_id), self._client)
        return self._call(
            "POST", "admin/list_messaging_channels", params, list[AdminMessagingChannel]
        )

    def mute_all_channels(self, user_id: str) -> APIResponse[None]:
        """Mute a user application-wide."""
        params = with_auth(UserIdRequest(id=user_id), self._client)
        return self._call("POST", "admin/mute", params)

    def mute(self, params: MuteRequest) -> APIResponse[list[str]]:
        """Mute a user in the listed channels; returns the muted channel urls."""
        return self._call("POST", "admin/mute", with_auth(params, self._client), list[str])

    def unmute_all_channels(self, user_id: str) -> APIResponse[None]:
        """Lift an application-wide mute. Channel-level mutes are left alone."""
        params = with_auth(UserIdRequest(id=user_id), self._client)
        return self._call("POST", "admin/unmute", params)

    def unmute(self, params: UnmuteRequest) -> APIResponse[list[str]]:
        return self._call("POST", "admin/unmute", with_auth(params, self._client), list[str])

    def mute_list(self, channel_urls: list[str]) -> APIResponse[list[str]]:
        """User ids muted in the given channels."""
        params = with_auth(MuteListRequest(channel_urls=channel_urls), self._client)
        return self._call("POST", "admin/mute_list", params, list[str])

    def concurrent_user_count(self) -> APIResponse[ConcurrentUserCount]:
        params = with_auth(AuthRequest(), self._client)
        return self._call("POST", "admin/ccu_count", params, ConcurrentUserCount)

    def member_count(self, channel_url: str) -> APIResponse[ChannelMemberCount]:
        params = with_auth(ChannelUrlRequest(channel_url=channel_url), self._client)
        return self._call("POST", "admin/member_count", params, ChannelMemberCount)
