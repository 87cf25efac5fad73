"""Async HTTP client for the FACEIT Data API v4.

This module provides a type-safe interface to every Data API v4 read
endpoint. Each call is a single GET whose outcome is either a decoded
Pydantic model or one exception from ``faceit.client.exceptions``.
Nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from httpx import AsyncClient, HTTPError
from pydantic import BaseModel

from faceit.client.exceptions import FaceitClientError, FaceitTransportError
from faceit.client.request import QueryValue, auth_headers, build_request
from faceit.client.response import classify_response
from faceit.config import ClientBuilder, ClientConfig
from faceit.models import (
    Championship,
    ChampionshipsList,
    CompetitionsSearchList,
    Game,
    GamesList,
    GlobalRankingList,
    Hub,
    HubMembers,
    HubsList,
    HubStats,
    Match,
    MatchesList,
    MatchHistoryList,
    MatchmakingList,
    MatchStats,
    Player,
    PlayerBansList,
    PlayerGlobalRanking,
    PlayerStats,
    TeamList,
    TeamsSearchList,
    TournamentsList,
    UsersSearchList,
)
from faceit.resources import (
    ChampionshipResource,
    GameResource,
    HubResource,
    MatchResource,
    PlayerResource,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class FaceitClient:
    """Async client for FACEIT Data API v4 interactions.

    The configuration is immutable and shared by all in-flight requests, so
    a single client may serve any number of concurrent calls.

    Example:
        async with FaceitClient.builder().api_key("key").build() as client:
            player = await client.get_player("player-id")
            history = await client.get_player_history(player.player_id, "cs2", limit=20)
    """

    def __init__(self, config: ClientConfig | None = None, **transport_options: Any):
        """Initialize the client.

        Args:
            config: Connection settings (default: ``ClientConfig()``).
            **transport_options: Extra keyword arguments for
                ``httpx.AsyncClient`` (e.g. ``transport``, ``proxy``, ``verify``).
        """
        self._config = config or ClientConfig()
        self._transport_options = transport_options
        self._client: AsyncClient | None = None

    @staticmethod
    def builder() -> ClientBuilder:
        """Create a builder for customizing the client configuration."""
        return ClientBuilder()

    @property
    def config(self) -> ClientConfig:
        """The immutable client configuration."""
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def api_key(self) -> str | None:
        return self._config.api_key

    @property
    def timeout(self) -> float:
        return self._config.timeout

    async def __aenter__(self) -> FaceitClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create the underlying httpx.AsyncClient.

        Calling connect() on a connected client is a no-op.
        """
        if self._client is None:
            # The configured timeout wins over a timeout in transport_options
            options = {**self._transport_options, "timeout": self._config.timeout}
            self._client = AsyncClient(**options)
            logger.debug("HTTP client connected to %s", self._config.base_url)

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")

    # =========================================================================
    # Resource Handles
    # =========================================================================

    def player(self, player_id: str) -> PlayerResource:
        """Return a handle bound to one player."""
        return PlayerResource(player_id, self)

    def match(self, match_id: str) -> MatchResource:
        """Return a handle bound to one match."""
        return MatchResource(match_id, self)

    def game(self, game_id: str) -> GameResource:
        """Return a handle bound to one game."""
        return GameResource(game_id, self)

    def hub(self, hub_id: str) -> HubResource:
        """Return a handle bound to one hub."""
        return HubResource(hub_id, self)

    def championship(self, championship_id: str) -> ChampionshipResource:
        """Return a handle bound to one championship."""
        return ChampionshipResource(championship_id, self)

    # =========================================================================
    # Player API Methods
    # =========================================================================

    async def get_player(self, player_id: str) -> Player:
        """Get player details by player ID.

        Args:
            player_id: The FACEIT player ID.

        Returns:
            Player with profile information.

        Raises:
            NotFoundError: If the player does not exist.
            FaceitError: For any other failure.
        """
        return await self._get(f"/players/{player_id}", Player)

    async def get_player_from_lookup(
        self,
        nickname: str | None = None,
        game: str | None = None,
        game_player_id: str | None = None,
    ) -> Player:
        """Look up a player by nickname or by in-game identifier.

        Args:
            nickname: FACEIT nickname.
            game: Game ID, used together with ``game_player_id``.
            game_player_id: The player's identifier inside the game.

        Returns:
            The matching Player.
        """
        return await self._get(
            "/players",
            Player,
            {"nickname": nickname, "game": game, "game_player_id": game_player_id},
        )

    async def get_player_stats(self, player_id: str, game_id: str) -> PlayerStats:
        """Get lifetime and per-segment statistics of a player for one game."""
        return await self._get(f"/players/{player_id}/stats/{game_id}", PlayerStats)

    async def get_player_history(
        self,
        player_id: str,
        game: str,
        from_: int | None = None,
        to: int | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchHistoryList:
        """Get player match history.

        Args:
            player_id: The FACEIT player ID.
            game: The game ID (required by the API).
            from_: Optional start timestamp (unix time).
            to: Optional end timestamp (unix time).
            offset: Optional pagination offset.
            limit: Optional page size.

        Returns:
            MatchHistoryList with the matching entries.
        """
        return await self._get(
            f"/players/{player_id}/history",
            MatchHistoryList,
            {"game": game, "from": from_, "to": to, "offset": offset, "limit": limit},
        )

    async def get_player_bans(
        self,
        player_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> PlayerBansList:
        """Get the bans of a player."""
        return await self._get(
            f"/players/{player_id}/bans",
            PlayerBansList,
            {"offset": offset, "limit": limit},
        )

    async def get_player_hubs(
        self,
        player_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> HubsList:
        """Get the hubs a player is a member of."""
        return await self._get(
            f"/players/{player_id}/hubs",
            HubsList,
            {"offset": offset, "limit": limit},
        )

    async def get_player_teams(
        self,
        player_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> TeamList:
        """Get the teams a player belongs to."""
        return await self._get(
            f"/players/{player_id}/teams",
            TeamList,
            {"offset": offset, "limit": limit},
        )

    async def get_player_tournaments(
        self,
        player_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> TournamentsList:
        """Get the tournaments a player took part in."""
        return await self._get(
            f"/players/{player_id}/tournaments",
            TournamentsList,
            {"offset": offset, "limit": limit},
        )

    # =========================================================================
    # Match API Methods
    # =========================================================================

    async def get_match(self, match_id: str) -> Match:
        """Get match details by match ID."""
        return await self._get(f"/matches/{match_id}", Match)

    async def get_match_stats(self, match_id: str) -> MatchStats:
        """Get per-round statistics of a match."""
        return await self._get(f"/matches/{match_id}/stats", MatchStats)

    # =========================================================================
    # Game API Methods
    # =========================================================================

    async def get_all_games(
        self,
        offset: int | None = None,
        limit: int | None = None,
    ) -> GamesList:
        """List the games available on FACEIT."""
        return await self._get("/games", GamesList, {"offset": offset, "limit": limit})

    async def get_game(self, game_id: str) -> Game:
        """Get game details by game ID."""
        return await self._get(f"/games/{game_id}", Game)

    async def get_parent_game(self, game_id: str) -> Game:
        """Get the parent of a game."""
        return await self._get(f"/games/{game_id}/parent", Game)

    async def get_game_matchmakings(
        self,
        game_id: str,
        region: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchmakingList:
        """List the matchmakings of a game, optionally filtered by region."""
        return await self._get(
            f"/games/{game_id}/matchmakings",
            MatchmakingList,
            {"region": region, "offset": offset, "limit": limit},
        )

    # =========================================================================
    # Hub API Methods
    # =========================================================================

    async def get_hub(self, hub_id: str, expanded: Sequence[str] | None = None) -> Hub:
        """Get hub details.

        Args:
            hub_id: The hub ID.
            expanded: Entities to embed, e.g. ``["organizer", "game"]``.

        Returns:
            Hub, with ``organizer_data``/``game_data`` set when expanded.
        """
        return await self._get(f"/hubs/{hub_id}", Hub, {"expanded": expanded})

    async def get_hub_matches(
        self,
        hub_id: str,
        match_type: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchesList:
        """List hub matches.

        Args:
            hub_id: The hub ID.
            match_type: "all", "upcoming", "ongoing" or "past".
            offset: Optional pagination offset.
            limit: Optional page size.
        """
        return await self._get(
            f"/hubs/{hub_id}/matches",
            MatchesList,
            {"type": match_type, "offset": offset, "limit": limit},
        )

    async def get_hub_members(
        self,
        hub_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> HubMembers:
        """List hub members."""
        return await self._get(
            f"/hubs/{hub_id}/members",
            HubMembers,
            {"offset": offset, "limit": limit},
        )

    async def get_hub_stats(
        self,
        hub_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> HubStats:
        """Get the hub leaderboard statistics."""
        return await self._get(
            f"/hubs/{hub_id}/stats",
            HubStats,
            {"offset": offset, "limit": limit},
        )

    # =========================================================================
    # Championship API Methods
    # =========================================================================

    async def get_championships(
        self,
        game: str,
        championship_type: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> ChampionshipsList:
        """List championships of a game.

        Args:
            game: The game ID (required by the API).
            championship_type: "all", "upcoming", "ongoing" or "past".
            offset: Optional pagination offset.
            limit: Optional page size.
        """
        return await self._get(
            "/championships",
            ChampionshipsList,
            {"game": game, "type": championship_type, "offset": offset, "limit": limit},
        )

    async def get_championship(
        self,
        championship_id: str,
        expanded: Sequence[str] | None = None,
    ) -> Championship:
        """Get championship details."""
        return await self._get(
            f"/championships/{championship_id}",
            Championship,
            {"expanded": expanded},
        )

    async def get_championship_matches(
        self,
        championship_id: str,
        match_type: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> MatchesList:
        """List championship matches."""
        return await self._get(
            f"/championships/{championship_id}/matches",
            MatchesList,
            {"type": match_type, "offset": offset, "limit": limit},
        )

    # =========================================================================
    # Search API Methods
    # =========================================================================

    async def search_players(
        self,
        nickname: str,
        game: str | None = None,
        country: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> UsersSearchList:
        """Search players by nickname."""
        return await self._get(
            "/search/players",
            UsersSearchList,
            {
                "nickname": nickname,
                "game": game,
                "country": country,
                "offset": offset,
                "limit": limit,
            },
        )

    async def search_teams(
        self,
        nickname: str,
        game: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> TeamsSearchList:
        """Search teams by nickname."""
        return await self._get(
            "/search/teams",
            TeamsSearchList,
            {"nickname": nickname, "game": game, "offset": offset, "limit": limit},
        )

    async def search_hubs(
        self,
        name: str,
        game: str | None = None,
        region: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> CompetitionsSearchList:
        """Search hubs by name."""
        return await self._get(
            "/search/hubs",
            CompetitionsSearchList,
            {
                "name": name,
                "game": game,
                "region": region,
                "offset": offset,
                "limit": limit,
            },
        )

    # =========================================================================
    # Ranking API Methods
    # =========================================================================

    async def get_global_ranking(
        self,
        game_id: str,
        region: str,
        country: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> GlobalRankingList:
        """Get the regional leaderboard of a game.

        Args:
            game_id: The game ID.
            region: The region (e.g. "EU").
            country: Optional ISO 3166-1 country code filter.
            offset: Optional pagination offset.
            limit: Optional page size.
        """
        return await self._get(
            f"/rankings/games/{game_id}/regions/{region}",
            GlobalRankingList,
            {"country": country, "offset": offset, "limit": limit},
        )

    async def get_player_ranking(
        self,
        game_id: str,
        region: str,
        player_id: str,
        country: str | None = None,
        limit: int | None = None,
    ) -> PlayerGlobalRanking:
        """Get the leaderboard window around a player.

        Returns:
            PlayerGlobalRanking whose ``position`` is the player's own rank.
        """
        return await self._get(
            f"/rankings/games/{game_id}/regions/{region}/players/{player_id}",
            PlayerGlobalRanking,
            {"country": country, "limit": limit},
        )

    # =========================================================================
    # Internal HTTP Methods
    # =========================================================================

    async def _get(
        self,
        path: str,
        response_model: type[T],
        params: Mapping[str, QueryValue] | None = None,
    ) -> T:
        """Perform a GET request and classify the response.

        Args:
            path: API path below /data/v4 (e.g. "/players/abc").
            response_model: Pydantic model class for response parsing.
            params: Optional query parameters; None values are omitted.

        Returns:
            Parsed response as the specified model type.

        Raises:
            FaceitClientError: If the client is not connected.
            FaceitTransportError: If the request fails before a response.
            FaceitError: Any classified API error.
        """
        if self._client is None:
            raise FaceitClientError("Client not connected. Call connect() first.")

        url, query = build_request(self._config.base_url, path, params)
        headers = {"Accept": "application/json", **auth_headers(self._config.api_key)}

        logger.debug("Request GET %s %s", url, query)
        try:
            response = await self._client.get(url, params=query, headers=headers)
        except HTTPError as e:
            raise FaceitTransportError(f"Request to {url} failed: {e}") from e

        return classify_response(response.status_code, response.text, response_model)
