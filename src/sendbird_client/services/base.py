"""Shared plumbing for resource handles."""

from typing import TYPE_CHECKING, Any

from sendbird_client.response import APIResponse

if TYPE_CHECKING:
    from sendbird_client.client import SendbirdClient


class BaseService:
    """A resource family bound to the client that performs its calls."""

    def __init__(self, client: "SendbirdClient") -> None:
        self._client = client

    def _call(
        self,
        method: str,
        path: str,
        body: Any = None,
        destination: Any = None,
        params: dict[str, str] | None = None,
    ) -> APIResponse:
        request = self._client.build_request(method, path, body, params=params)
        return self._client.execute(request, destination)
