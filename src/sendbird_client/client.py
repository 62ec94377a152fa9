"""Sendbird API client and the shared request/response transport.

Every resource operation builds a request with ``build_request``, runs it
with ``execute`` and gets back an ``APIResponse``. Failures are raised from
the ``sendbird_client.errors`` taxonomy; nothing is retried.

Usage:
    client = SendbirdClient(app_id="...", api_token="...")
    channels = client.chat.list().data
"""

import json
import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any, BinaryIO

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from sendbird_client.config import DEFAULT_BASE_URL, Settings, get_settings
from sendbird_client.errors import (
    DecodeError,
    MalformedRequestError,
    NotFoundError,
    ServiceError,
    TransportError,
)
from sendbird_client.response import APIResponse
from sendbird_client.services import (
    AdminService,
    BotService,
    ChatChannelService,
    MessagingChannelService,
    UserService,
)

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json, charset=utf8"

RequestCompletionCallback = Callable[[httpx.Request, httpx.Response], None]


class SendbirdClient:
    """Holds credentials and the HTTP client, and owns one handle per resource family.

    The configuration is read-only after construction, so a single instance
    can be shared between threads. Register the completion observer before
    sharing it.
    """

    def __init__(
        self,
        app_id: str,
        api_token: str,
        http_client: httpx.Client | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        webhook_max_concurrency: int = 0,
    ) -> None:
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)
        self._on_request_completed: RequestCompletionCallback | None = None

        self.base_url = base_url
        self.app_id = app_id
        self.api_token = api_token
        self.content_type = CONTENT_TYPE

        self.users = UserService(self)
        self.chat = ChatChannelService(self)
        self.messaging = MessagingChannelService(self)
        self.admin = AdminService(self)
        self.bot = BotService(self, max_concurrency=webhook_max_concurrency)

        if not api_token:
            logger.warning("Sendbird API token is empty; the service will reject calls")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SendbirdClient":
        """Build a client from application settings (environment / .env)."""
        settings = settings or get_settings()
        return cls(
            app_id=settings.sendbird_app_id,
            api_token=settings.sendbird_api_token,
            base_url=settings.sendbird_base_url,
            timeout=settings.http_timeout,
            webhook_max_concurrency=settings.webhook_max_concurrency,
        )

    def on_request_completed(self, callback: RequestCompletionCallback | None) -> None:
        """Register a function called with (request, response) after every response.

        Exceptions raised by the callback are logged and discarded.
        """
        self._on_request_completed = callback

    @staticmethod
    def normalize_id(value: str) -> str:
        """Return the part of an id after its last slash."""
        return value.rsplit("/", 1)[-1]

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Create a request for ``path`` relative to ``base_url``.

        ``body`` is JSON encoded when given: pydantic envelopes are dumped by
        alias with unset (None) fields left out.

        Raises:
            MalformedRequestError: the URL is invalid or the body cannot be encoded.
        """
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        content = _encode_body(body) if body is not None else None
        try:
            return self._http.build_request(
                method.upper(),
                url,
                params=params,
                content=content,
                headers={"Content-Type": self.content_type},
            )
        except httpx.InvalidURL as exc:
            raise MalformedRequestError(f"Invalid request URL {url!r}: {exc}") from exc

    def execute(self, request: httpx.Request, destination: Any = None) -> APIResponse:
        """Send ``request`` once and decode a 2xx body into ``destination``.

        ``destination`` is any type pydantic can validate (a model class,
        ``list[Model]``, ``dict[str, int]``...). When it is None the body is
        not decoded and ``data`` stays None.

        Raises:
            TransportError: no response was obtained.
            NotFoundError: the service answered 404.
            ServiceError: the service answered any other non-2xx status.
            DecodeError: the 2xx body does not match ``destination``.
        """
        response = self._send(request)
        check_response(response)
        if destination is None:
            return APIResponse(http_response=response)
        return APIResponse(http_response=response, data=_decode(response, destination))

    def execute_raw(self, request: httpx.Request, sink: BinaryIO) -> APIResponse:
        """Send ``request`` once and copy a 2xx body, unmodified, into ``sink``.

        Errors are classified exactly as in ``execute``.
        """
        response = self._send(request, stream=True)
        try:
            if not _is_success(response.status_code):
                response.read()
                check_response(response)
            for chunk in response.iter_bytes():
                sink.write(chunk)
        finally:
            response.close()
        return APIResponse(http_response=response)

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "SendbirdClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(self, request: httpx.Request, stream: bool = False) -> httpx.Response:
        logger.debug("Sendbird request %s %s", request.method, request.url.path)
        try:
            response = self._http.send(request, stream=stream)
        except httpx.HTTPError as exc:
            logger.warning(
                "Sendbird request failed: %s %s", request.method, request.url.path, exc_info=True
            )
            raise TransportError(f"{request.method} {request.url.path}: {exc}") from exc

        if self._on_request_completed is not None:
            try:
                self._on_request_completed(request, response)
            except Exception:
                logger.warning("Request completion callback raised", exc_info=True)

        return response


def check_response(response: httpx.Response) -> None:
    """Raise the matching error for a non-2xx response; return None otherwise.

    Error bodies are expected to be empty or JSON with a ``message`` field.
    Anything else leaves the error message empty.
    """
    if _is_success(response.status_code):
        return

    if response.status_code == 404:
        raise NotFoundError(response)

    message = ""
    code = None
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        if isinstance(payload.get("message"), str):
            message = payload["message"]
        if isinstance(payload.get("code"), int):
            code = payload["code"]

    error = ServiceError(response, message, code)
    logger.warning("Sendbird error response: %s", error)
    raise error


def _is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _encode_body(body: Any) -> bytes:
    try:
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            payload = body
        return json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise MalformedRequestError(f"Request body is not JSON serializable: {exc}") from exc


@lru_cache(maxsize=None)
def _adapter(destination: Any) -> TypeAdapter:
    return TypeAdapter(destination)


def _decode(response: httpx.Response, destination: Any) -> Any:
    try:
        return _adapter(destination).validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(
            f"{response.request.method} {response.request.url.path}: "
            f"unexpected response body ({exc.error_count()} error(s))"
        ) from exc


_client: SendbirdClient | None = None


def get_client() -> SendbirdClient:
    """Return a cached client built from settings on first call."""
    global _client
    if _client is None:
        _client = SendbirdClient.from_settings()
    return _client


def reset_client() -> None:
    """Close and drop the cached client. Used for testing."""
    global _client
    if _client is not None:
        _client.close()
    _client = None
