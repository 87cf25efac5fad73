"""HTTP client module for the FACEIT Data API.

This module provides an async HTTP client wrapper for every Data API v4
read endpoint, together with the request builder, the response classifier
and the error hierarchy.

Usage:
    from faceit.client import FaceitClient, NotFoundError

    async with FaceitClient() as client:
        player = await client.get_player("player-id")
"""

from faceit.client.exceptions import (
    BadRequestError,
    FaceitAPIError,
    FaceitClientError,
    FaceitError,
    FaceitTransportError,
    ForbiddenError,
    InvalidCredentialError,
    NotFoundError,
    RateLimitedError,
    ResponseDecodeError,
    ServerError,
    ServiceUnavailableError,
)
from faceit.client.http_client import FaceitClient
from faceit.client.request import (
    API_PREFIX,
    auth_headers,
    build_query,
    build_request,
    build_url,
)
from faceit.client.response import classify_response

__all__ = [
    "FaceitClient",
    "FaceitError",
    "FaceitClientError",
    "FaceitTransportError",
    "FaceitAPIError",
    "InvalidCredentialError",
    "ServerError",
    "BadRequestError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitedError",
    "ServiceUnavailableError",
    "ResponseDecodeError",
    "API_PREFIX",
    "auth_headers",
    "build_query",
    "build_request",
    "build_url",
    "classify_response",
]
