"""Tests for the user endpoints against the fake service."""

import pytest

from sendbird_client.client import SendbirdClient
from sendbird_client.errors import ServiceError
from sendbird_client.models.user import BlockRequest, DeactivateRequest, User, UserRequest

USER_JSON = {
    "user_id": "123",
    "nickname": "bugs",
    "picture": "http://sendbird.com/123.jpg",
    "access_token": "abcdef",
    "is_active": True,
}


@pytest.mark.parametrize(
    ("operation", "path"),
    [("create", "/user/create"), ("update", "/user/update"), ("auth", "/user/auth")],
)
def test_user_operations_return_user(client: SendbirdClient, fake, operation, path):
    fake.add("POST", path, USER_JSON)
    params = UserRequest(
        id="123",
        nickname="bugs",
        image_url="http://sendbird.com/123.jpg",
        issue_access_token=True,
    )

    user = getattr(client.users, operation)(params).data

    assert fake.last_request.method == "POST"
    assert fake.last_json() == {
        "auth": "API_TOKEN_1",
        "id": "123",
        "nickname": "bugs",
        "image_url": "http://sendbird.com/123.jpg",
        "issue_access_token": True,
    }
    assert user == User(
        user_id="123",
        nickname="bugs",
        picture="http://sendbird.com/123.jpg",
        access_token="abcdef",
        is_active=True,
    )


def test_create_omits_unset_fields(client: SendbirdClient, fake):
    fake.add("POST", "/user/create", USER_JSON)
    client.users.create(UserRequest(id="123"))
    assert fake.last_json() == {"auth": "API_TOKEN_1", "id": "123"}


@pytest.mark.parametrize(("operation", "path"), [("block", "/user/block"), ("unblock", "/user/unblock")])
def test_block_and_unblock(client: SendbirdClient, fake, operation, path):
    fake.add("POST", path, {})

    response = getattr(client.users, operation)(BlockRequest(id="123", target_id="456"))

    assert response.data is None
    assert fake.last_request.url.path == path
    assert fake.last_json() == {"auth": "API_TOKEN_1", "id": "123", "target_id": "456"}


def test_deactivate(client: SendbirdClient, fake):
    fake.add("POST", "/user/deactivate", {})
    client.users.deactivate(DeactivateRequest(id="123"))
    assert fake.last_json() == {"auth": "API_TOKEN_1", "id": "123"}


def test_create_surfaces_service_error(client: SendbirdClient, fake):
    fake.add("POST", "/user/create", {"message": "User already exists"}, status_code=400)
    with pytest.raises(ServiceError) as exc_info:
        client.users.create(UserRequest(id="123"))
    assert exc_info.value.message == "User already exists"
