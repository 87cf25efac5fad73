"""Game and matchmaking models."""

from faceit.models.base import FaceitModel, Pagination

# =============================================================================
# Games
# =============================================================================


class GameAssets(FaceitModel):
    """Artwork URLs for a game."""

    cover: str | None = None
    featured_img_l: str | None = None
    featured_img_m: str | None = None
    featured_img_s: str | None = None
    flag_img_icon: str | None = None
    flag_img_l: str | None = None
    flag_img_m: str | None = None
    flag_img_s: str | None = None
    landing_page: str | None = None


class Game(FaceitModel):
    """Response from GET /games/{game_id} and GET /games/{game_id}/parent."""

    game_id: str
    short_label: str
    long_label: str
    assets: GameAssets | None = None
    platforms: list[str] | None = None
    regions: list[str] | None = None
    order: int | None = None
    parent_game_id: str | None = None


class GamesList(Pagination):
    """Response from GET /games endpoint."""

    items: list[Game]


# =============================================================================
# Matchmakings
# =============================================================================


class MatchmakingQueue(FaceitModel):
    """A queue inside a matchmaking."""

    id: str
    name: str
    open: bool | None = None
    paused: bool | None = None
    organizer_id: str | None = None


class Matchmaking(FaceitModel):
    """Full matchmaking description."""

    id: str
    name: str
    game: str
    region: str | None = None
    short_description: str | None = None
    long_description: str | None = None
    icon: str | None = None
    league_id: str | None = None
    queues: list[MatchmakingQueue] | None = None


class MatchmakingSlim(FaceitModel):
    """Matchmaking summary returned in list responses."""

    id: str
    name: str
    game: str
    region: str | None = None
    has_league: bool | None = None


class MatchmakingList(Pagination):
    """Response from GET /games/{game_id}/matchmakings endpoint."""

    items: list[MatchmakingSlim]
