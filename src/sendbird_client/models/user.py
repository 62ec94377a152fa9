"""User envelopes."""

from sendbird_client.models.common import AuthRequest, SendbirdRecord


class UserRequest(AuthRequest):
    """Create, update or authenticate a user. Unset fields are not sent."""

    id: str | None = None
    nickname: str | None = None
    image_url: str | None = None
    issue_access_token: bool | None = None


class BlockRequest(AuthRequest):
    id: str
    target_id: str | None = None


class DeactivateRequest(AuthRequest):
    id: str


class User(SendbirdRecord):
    id: str = ""
    user_id: str = ""
    nickname: str = ""
    picture: str = ""
    access_token: str = ""
    is_active: bool = False
