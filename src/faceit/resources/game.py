"""Game handle bound to a single game ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from faceit.models import ChampionshipsList, Game, GlobalRankingList, MatchmakingList

if TYPE_CHECKING:
    from faceit.client.http_client import FaceitClient


class GameResource:
    """Convenience access to one game.

    Example:
        cs2 = client.game("cs2")
        leaderboard = await cs2.ranking("EU", limit=10)
    """

    def __init__(self, game_id: str, client: FaceitClient):
        self._game_id = game_id
        self._client = client

    @property
    def id(self) -> str:
        """The game ID this handle is bound to."""
        return self._game_id

    async def get(self) -> Game:
        return await self._client.get_game(self._game_id)

    async def parent(self) -> Game:
        return await self._client.get_parent_game(self._game_id)

    async def matchmakings(
        self,
        region: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchmakingList:
        return await self._client.get_game_matchmakings(
            self._game_id, region=region, offset=offset, limit=limit
        )

    async def ranking(
        self,
        region: str,
        country: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> GlobalRankingList:
        return await self._client.get_global_ranking(
            self._game_id, region, country=country, offset=offset, limit=limit
        )

    async def championships(
        self,
        championship_type: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> ChampionshipsList:
        return await self._client.get_championships(
            self._game_id,
            championship_type=championship_type,
            offset=offset,
            limit=limit,
        )

    def __repr__(self) -> str:
        return f"GameResource(id={self._game_id!r})"
