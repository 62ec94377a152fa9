"""Open chat channel endpoints (``channel/*``).

Channel records come back with the cover image mirrored into ``cover_url``
(see ``sendbird_client.models.chat``).
"""

from sendbird_client.auth import with_auth
from sendbird_client.models.chat import (
    ChatChannel,
    ChatChannelMessageRequest,
    ChatChannelRequest,
    ChatChannelUpdate,
    ChatChannelUpdateRequest,
    ChatChannelView,
)
from sendbird_client.models.common import (
    AuthRequest,
    ChannelMetadataRequest,
    ChannelSetMetacounterRequest,
    ChannelSetMetadataRequest,
    ChannelUrlRequest,
    MessageCount,
)
from sendbird_client.response import APIResponse
from sendbird_client.services.base import BaseService


class ChatChannelService(BaseService):
    def create(self, params: ChatChannelRequest) -> APIResponse[ChatChannel]:
        return self._call("POST", "channel/create", with_auth(params, self._client), ChatChannel)

    def list(self) -> APIResponse[list[ChatChannel]]:
        params = with_auth(AuthRequest(), self._client)
        return self._call("POST", "channel/list", params, list[ChatChannel])

    def update(self, params: ChatChannelUpdateRequest) -> APIResponse[ChatChannelUpdate]:
        return self._call(
            "POST", "channel/update", with_auth(params, self._client), ChatChannelUpdate
        )

    def delete(self, channel_url: str) -> APIResponse[None]:
        params = with_auth(ChannelUrlRequest(channel_url=channel_url), self._client)
        return self._call("POST", "channel/delete", params)

    def view(self, channel_url: str) -> APIResponse[ChatChannelView]:
        """Channel information together with its online members."""
        params = with_auth(ChannelUrlRequest(channel_url=channel_url), self._client)
        return self._call("POST", "channel/view", params, ChatChannelView)

    def send(self, params: ChatChannelMessageRequest) -> APIResponse[None]:
        return self._call("POST", "channel/send", with_auth(params, self._client))

    def get_metadata(self, params: ChannelMetadataRequest) -> APIResponse[dict[str, str]]:
        return self._call(
            "POST", "channel/get_metadata", with_auth(params, self._client), dict[str, str]
        )

    def set_metadata(self, params: ChannelSetMetadataRequest) -> APIResponse[dict[str, str]]:
        return self._call(
            "POST", "channel/set_metadata", with_auth(params, self._client), dict[str, str]
        )

    def get_metacounter(self, params: ChannelMetadataRequest) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "channel/get_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def set_metacounter(
        self, params: ChannelSetMetacounterRequest
    ) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "channel/set_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def increase_metacounter(
        self, params: ChannelSetMetacounterRequest
    ) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "channel/incr_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def decrease_metacounter(
        self, params: ChannelSetMetacounterRequest
    ) -> APIResponse[dict[str, int]]:
        return self._call(
            "POST", "channel/decr_metacounter", with_auth(params, self._client), dict[str, int]
        )

    def message_count(self, channel_url: str) -> APIResponse[MessageCount]:
        params = with_auth(ChannelUrlRequest(channel_url=channel_url), self._client)
        return self._call("POST", "channel/message_count", params, MessageCount)
