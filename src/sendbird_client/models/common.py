"""Envelope base classes and shapes shared by several resource families."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class SendbirdRecord(BaseModel):
    """Base for decoded response and callback records.

    A JSON null leaves the field at its default, so records never fail on
    null where a value was optional.
    """

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class AuthRequest(BaseModel):
    """First-generation request: the API token travels in the ``auth`` field."""

    model_config = ConfigDict(populate_by_name=True)

    auth: str | None = None  # omitted from JSON until populated


class ApiTokenRequest(BaseModel):
    """Second-generation (bot API) request carrying ``api_token`` in the body."""

    model_config = ConfigDict(populate_by_name=True)

    api_token: str = ""


class ChannelUrlRequest(AuthRequest):
    """Body for calls that only identify a channel."""

    channel_url: str


class ChannelMetadataRequest(AuthRequest):
    """Keys to read from a channel's metadata or metacounter."""

    channel_url: str
    keys: list[str] = []


class ChannelSetMetadataRequest(AuthRequest):
    """Metadata values to write; all values are strings."""

    channel_url: str
    data: dict[str, str] = {}


class ChannelSetMetacounterRequest(AuthRequest):
    """Metacounter values or deltas; all values are integers."""

    channel_url: str
    data: dict[str, int] = {}


class Member(SendbirdRecord):
    id: str = ""
    image: str = ""
    name: str = ""


class MessageCount(SendbirdRecord):
    message_count: int = 0
