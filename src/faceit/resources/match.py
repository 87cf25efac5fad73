"""Match handle bound to a single match ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from faceit.models import Match, MatchStats

if TYPE_CHECKING:
    from faceit.client.http_client import FaceitClient


class MatchResource:
    """Convenience access to one match.

    Example:
        match = client.match("1-abc")
        details = await match.get()
    """

    def __init__(self, match_id: str, client: FaceitClient):
        self._match_id = match_id
        self._client = client

    @property
    def id(self) -> str:
        """The match ID this handle is bound to."""
        return self._match_id

    async def get(self) -> Match:
        return await self._client.get_match(self._match_id)

    async def stats(self) -> MatchStats:
        return await self._client.get_match_stats(self._match_id)

    def __repr__(self) -> str:
        return f"MatchResource(id={self._match_id!r})"
