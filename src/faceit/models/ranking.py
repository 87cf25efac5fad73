"""Global ranking models."""

from faceit.models.base import FaceitModel, Pagination


class GlobalRanking(FaceitModel):
    """A single row of a regional leaderboard."""

    player_id: str
    nickname: str
    position: int
    faceit_elo: int
    game_skill_level: int
    country: str | None = None


class GlobalRankingList(Pagination):
    """Response from GET /rankings/games/{game_id}/regions/{region} endpoint."""

    items: list[GlobalRanking]


class PlayerGlobalRanking(Pagination):
    """Leaderboard window around a player.

    Response from GET /rankings/games/{game_id}/regions/{region}/players/{player_id};
    ``position`` is the requested player's own rank.
    """

    position: int
    items: list[GlobalRanking]
