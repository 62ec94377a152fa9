"""Credential decorators for the two generations of the Sendbird API.

First-generation endpoints expect the API token inline as ``auth``; the bot
endpoints (``v2/bots``) expect ``api_token``, in the JSON body for mutating
calls and in the query string for reads. Each operation applies exactly one
of these before building its request.
"""

from typing import TYPE_CHECKING, TypeVar

from sendbird_client.models.common import ApiTokenRequest, AuthRequest

if TYPE_CHECKING:
    from sendbird_client.client import SendbirdClient

A = TypeVar("A", bound=AuthRequest)
V = TypeVar("V", bound=ApiTokenRequest)


def with_auth(params: A, client: "SendbirdClient") -> A:
    """Set the inline ``auth`` field and return the same envelope."""
    params.auth = client.api_token
    return params


def with_api_token(params: V, client: "SendbirdClient") -> V:
    """Set the body ``api_token`` field and return the same envelope."""
    params.api_token = client.api_token
    return params


def api_token_query(client: "SendbirdClient") -> dict[str, str]:
    """Query parameters for read-only bot calls that carry no body."""
    return {"api_token": client.api_token}
