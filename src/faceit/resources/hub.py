"""Hub handle bound to a single hub ID."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from faceit.models import Hub, HubMembers, HubStats, MatchesList

if TYPE_CHECKING:
    from faceit.client.http_client import FaceitClient


class HubResource:
    """Convenience access to one hub."""

    def __init__(self, hub_id: str, client: FaceitClient):
        self._hub_id = hub_id
        self._client = client

    @property
    def id(self) -> str:
        """The hub ID this handle is bound to."""
        return self._hub_id

    async def get(self, expanded: Sequence[str] | None = None) -> Hub:
        return await self._client.get_hub(self._hub_id, expanded=expanded)

    async def matches(
        self,
        match_type: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchesList:
        return await self._client.get_hub_matches(
            self._hub_id, match_type=match_type, offset=offset, limit=limit
        )

    async def members(
        self, offset: int | None = None, limit: int | None = None
    ) -> HubMembers:
        return await self._client.get_hub_members(
            self._hub_id, offset=offset, limit=limit
        )

    async def stats(self, offset: int | None = None, limit: int | None = None) -> HubStats:
        return await self._client.get_hub_stats(self._hub_id, offset=offset, limit=limit)

    def __repr__(self) -> str:
        return f"HubResource(id={self._hub_id!r})"
