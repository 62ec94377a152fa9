"""Messaging channel endpoints (``messaging/*``).

create and update answer with the channel nested under a ``channel`` key;
those two operations unwrap it before returning.
"""

import dataclasses

from sendbird_client.auth import with_auth
from sendbird_client.models.common import (
    ChannelMetadataRequest,
    ChannelSetMetacounterRequest,
    ChannelSetMetadataRequest,
    ChannelUrlRequest,
    MessageCount,
)
from sendbird_client.models.messaging import (
    MessagingChannel,
    MessagingChannelHideRequest,
    MessagingChannelInviteRequest,
    MessagingChannelLeaveRequest,
    MessagingChannelRequest,
    MessagingChannelResponse,
    MessagingChannelUpdateRequest,
    MessagingChannelUrl,
    MessagingChannelView,
)
from sendbird_client.response import APIResponse
from sendbird_client.services.base import BaseService


class MessagingChannelService(BaseService):
    def create(self, params: MessagingChannelRequest) -> APIResponse[MessagingChannel]:
        """Create a group messaging channel."""
        response = self._call(
            "POST", "messaging/create", with_auth(params, self._client), MessagingChannelResponse
        )
        return dataclasses.replace(response, data=response.data.channel)

    def update(self, params: MessagingChannelUpdateRequest) -> APIResponse[MessagingChannel]:
        response = self._call(
            "POST", "messaging/update", with_auth(params, self._client), MessagingChannelResponse
        )
        return dataclasses.replace(response, data=response.data.channel)

    def delete(self, channel_url: str) -> APIResponse[MessagingChannelUrl]:
        params = with_auth(ChannelUrlRequest(channel_url=channel_url), self._client)
        return self._call("POST", "messaging/delete", params, MessagingChannelUrl)

    def invite(self, params: MessagingChannelInviteRequest) -> APIResponse[MessagingChannelUrl]:
        return self._call(
            "POST", "messaging/invite", with_auth(params, self._client), MessagingChannelUrl
        )

    def hide(self, params: MessagingChannelHideRequest) -> APIResponse[MessagingChannelUrl]:
        """Hide the channel from the user's messaging channel list."""
        return self._call(
            "POST", "messaging/hide", with_auth(params, self._client), MessagingChannelUrl
        )

    def leave(self, params: MessagingChannelLeaveRequest) -> APIResponse[MessagingChannelUrl]:
        return self._call(
            "POST", "messaging/leave", with_auth(params, self._client), MessagingChannelUrl
        )

    def view(self, channel_url: str) -> APIResponse[MessagingChannelView]:
        params = with_auth(ChannelUrlRequest(channel_url=channel_url), self._client)
        return self._call("POST", "messaging/view", params, MessagingChannelView)

    def get_metadata(self, params: ChannelMetadataRequest) -> APIResponse[dict[str, str]]:
        return self._call(
            "POST", "messaging/get_metadata", with_auth(params, self._client), dict[str, str]
        )

    def set_metadata(self, params: ChannelSetMetadataRequest) -> APIResponse[dict[str, str]]:
        return self._call(
            "POST", "messaging/set_metadata", with_auth(params, self._client), dict[str, str]
        )

    def get_metacounter(self, params: ChannelMetadataRequest) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "messaging/get_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def set_metacounter(
        self, params: ChannelSetMetacounterRequest
    ) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "messaging/set_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def increase_metacounter(
        self, params: ChannelSetMetacounterRequest
    ) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "messaging/incr_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def decrease_metacounter(
        self, params: ChannelSetMetacounterRequest
    ) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "messaging/decr_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def message_count(self, channel_url: str) -> APIResponse[MessageCount]:
        params = with_auth(ChannelUrlRequest(channel_url=channel_url), self._client)
        return self._call("POST", "messaging/message_count", params, MessageCount)
