"""Response envelope returned by every API operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx

T = TypeVar("T")


@dataclass
class APIResponse(Generic[T]):
    """Decoded payload plus the raw ``httpx.Response`` it came from.

    ``data`` is None for operations that return no payload and for
    passthrough calls, whose body went to the caller's sink.
    """

    http_response: httpx.Response
    data: T | None = None

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def request(self) -> httpx.Request:
        return self.http_response.request
