"""Shared test fixtures."""

import json

import httpx
import pytest

from sendbird_client.client import SendbirdClient

TEST_BASE_URL = "https://api.sendbird.test"


class FakeSendbird:
    """In-process stand-in for the Sendbird API, routed by (method, path).

    Unrouted requests answer 404. Every request is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], object] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, json_body=None, status_code: int = 200, content=None):
        """Answer ``method path`` with a fixed JSON body (or raw ``content``)."""

        def handler(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        self.routes[(method, path)] = handler

    def add_handler(self, method: str, path: str, handler) -> None:
        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404)
        return handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def fake() -> FakeSendbird:
    return FakeSendbird()


@pytest.fixture
def client(fake: FakeSendbird):
    """SendbirdClient wired to the fake service."""
    http = httpx.Client(transport=httpx.MockTransport(fake))
    sendbird = SendbirdClient(
        app_id="SENDBIRD_APP_ID",
        api_token="API_TOKEN_1",
        http_client=http,
        base_url=TEST_BASE_URL,
    )
    yield sendbird
    http.close()
