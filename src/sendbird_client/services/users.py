"""User endpoints (``user/*``)."""

from sendbird_client.auth import with_auth
from sendbird_client.models.user import BlockRequest, DeactivateRequest, User, UserRequest
from sendbird_client.response import APIResponse
from sendbird_client.services.base import BaseService


class UserService(BaseService):
    def create(self, params: UserRequest) -> APIResponse[User]:
        """Create a user from an id / nickname / profile image combination."""
        return self._call("POST", "user/create", with_auth(params, self._client), User)

    def update(self, params: UserRequest) -> APIResponse[User]:
        return self._call("POST", "user/update", with_auth(params, self._client), User)

    def auth(self, params: UserRequest) -> APIResponse[User]:
        """Retrieve a user, optionally issuing an access token."""
        return self._call("POST", "user/auth", with_auth(params, self._client), User)

    def block(self, params: BlockRequest) -> APIResponse[None]:
        return self._call("POST", "user/block", with_auth(params, self._client))

    def unblock(self, params: BlockRequest) -> APIResponse[None]:
        return self._call("POST", "user/unblock", with_auth(params, self._client))

    def deactivate(self, params: DeactivateRequest) -> APIResponse[None]:
        return self._call("POST", "user/deactivate", with_auth(params, self._client))
