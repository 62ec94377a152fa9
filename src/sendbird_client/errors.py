"""Exception taxonomy for Sendbird API calls and webhook ingestion."""

import httpx

NOT_FOUND_MESSAGE = "Resource Not Found - please check the URL"


class SendbirdError(Exception):
    """Base exception for all client errors."""


class MalformedRequestError(SendbirdError):
    """The request could not be built: bad path or unserializable body."""


class TransportError(SendbirdError):
    """No response was obtained (connection refused, timeout, protocol error)."""


class ServiceError(SendbirdError):
    """Sendbird answered with a non-2xx status.

    ``message`` is the ``message`` field of the JSON error body, or an empty
    string when the body is missing or cannot be parsed.
    """

    def __init__(
        self,
        response: httpx.Response,
        message: str = "",
        code: int | None = None,
    ) -> None:
        self.response = response
        self.status_code = response.status_code
        self.method = response.request.method
        self.url = str(response.request.url)
        self.message = message
        self.code = code
        super().__init__(f"{self.method} {self.url}: {self.status_code} {self.message}")


class NotFoundError(ServiceError):
    """HTTP 404. The body is ignored and the message is fixed."""

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(response, NOT_FOUND_MESSAGE)


class DecodeError(SendbirdError):
    """A 2xx response body did not match the expected shape."""


class WebhookDecodeError(SendbirdError):
    """An inbound bot callback body could not be read or parsed."""
