"""FACEIT Data API v4 client.

Layers:
- models: Pydantic response models
- client: async HTTP client, request builder, response classifier, errors
- resources: identity-bound convenience handles
- cli: command-line interface

Usage:
    from faceit import FaceitClient

    async with FaceitClient.builder().api_key("key").build() as client:
        player = await client.get_player("player-id")
"""

from faceit.client import (
    FaceitAPIError,
    FaceitClient,
    FaceitError,
    FaceitTransportError,
    InvalidCredentialError,
    NotFoundError,
    ServerError,
)
from faceit.config import ClientBuilder, ClientConfig

__version__ = "0.1.0"
__all__ = [
    "ClientBuilder",
    "ClientConfig",
    "FaceitAPIError",
    "FaceitClient",
    "FaceitError",
    "FaceitTransportError",
    "InvalidCredentialError",
    "NotFoundError",
    "ServerError",
]
