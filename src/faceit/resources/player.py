"""Player handle bound to a single player ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from faceit.models import (
    HubsList,
    MatchHistoryList,
    Player,
    PlayerBansList,
    PlayerGlobalRanking,
    PlayerStats,
    TeamList,
    TournamentsList,
)

if TYPE_CHECKING:
    from faceit.client.http_client import FaceitClient


class PlayerResource:
    """Convenience access to one player's data.

    Every method forwards to the matching ``FaceitClient`` operation with the
    stored player ID. The handle must not be used after its client is closed.

    Example:
        player = client.player("player-id")
        profile = await player.get()
        history = await player.history("cs2", limit=20)
    """

    def __init__(self, player_id: str, client: FaceitClient):
        self._player_id = player_id
        self._client = client

    @property
    def id(self) -> str:
        """The player ID this handle is bound to."""
        return self._player_id

    async def get(self) -> Player:
        return await self._client.get_player(self._player_id)

    async def stats(self, game_id: str) -> PlayerStats:
        return await self._client.get_player_stats(self._player_id, game_id)

    async def history(
        self,
        game: str,
        from_: int | None = None,
        to: int | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchHistoryList:
        return await self._client.get_player_history(
            self._player_id, game, from_=from_, to=to, offset=offset, limit=limit
        )

    async def bans(
        self, offset: int | None = None, limit: int | None = None
    ) -> PlayerBansList:
        return await self._client.get_player_bans(
            self._player_id, offset=offset, limit=limit
        )

    async def hubs(self, offset: int | None = None, limit: int | None = None) -> HubsList:
        return await self._client.get_player_hubs(
            self._player_id, offset=offset, limit=limit
        )

    async def teams(self, offset: int | None = None, limit: int | None = None) -> TeamList:
        return await self._client.get_player_teams(
            self._player_id, offset=offset, limit=limit
        )

    async def tournaments(
        self, offset: int | None = None, limit: int | None = None
    ) -> TournamentsList:
        return await self._client.get_player_tournaments(
            self._player_id, offset=offset, limit=limit
        )

    async def ranking(
        self,
        game_id: str,
        region: str,
        country: str | None = None,
        limit: int | None = None,
    ) -> PlayerGlobalRanking:
        """Get the leaderboard window around this player."""
        return await self._client.get_player_ranking(
            game_id, region, self._player_id, country=country, limit=limit
        )

    def __repr__(self) -> str:
        return f"PlayerResource(id={self._player_id!r})"
