"""Championship handle bound to a single championship ID."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from faceit.models import Championship, MatchesList

if TYPE_CHECKING:
    from faceit.client.http_client import FaceitClient


class ChampionshipResource:
    """Convenience access to one championship."""

    def __init__(self, championship_id: str, client: FaceitClient):
        self._championship_id = championship_id
        self._client = client

    @property
    def id(self) -> str:
        """The championship ID this handle is bound to."""
        return self._championship_id

    async def get(self, expanded: Sequence[str] | None = None) -> Championship:
        return await self._client.get_championship(
            self._championship_id, expanded=expanded
        )

    async def matches(
        self,
        match_type: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchesList:
        return await self._client.get_championship_matches(
            self._championship_id, match_type=match_type, offset=offset, limit=limit
        )

    def __repr__(self) -> str:
        return f"ChampionshipResource(id={self._championship_id!r})"
