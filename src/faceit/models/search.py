"""Search result models."""

from faceit.models.base import FaceitModel, Pagination

# =============================================================================
# Player Search
# =============================================================================


class GameUserSearch(FaceitModel):
    """Game summary of a player search hit."""

    name: str
    # Sent as a string by the search endpoint
    skill_level: str


class UserSearch(FaceitModel):
    """A player search hit."""

    player_id: str
    nickname: str
    avatar: str | None = None
    country: str | None = None
    verified: bool | None = None
    status: str | None = None
    games: list[GameUserSearch] | None = None


class UsersSearchList(Pagination):
    """Response from GET /search/players endpoint."""

    items: list[UserSearch]


# =============================================================================
# Team Search
# =============================================================================


class TeamSearch(FaceitModel):
    """A team search hit."""

    team_id: str
    name: str
    avatar: str | None = None
    game: str | None = None
    faceit_url: str | None = None
    chat_room_id: str | None = None
    verified: bool | None = None


class TeamsSearchList(Pagination):
    """Response from GET /search/teams endpoint."""

    items: list[TeamSearch]


# =============================================================================
# Competition Search
# =============================================================================


class CompetitionSearch(FaceitModel):
    """A competition (hub) search hit."""

    competition_id: str
    competition_type: str
    name: str
    organizer_id: str
    game: str | None = None
    region: str | None = None
    organizer_name: str | None = None
    organizer_type: str | None = None
    status: str | None = None
    started_at: int | None = None
    slots: int | None = None
    number_of_members: int | None = None
    players_joined: int | None = None
    players_checkedin: int | None = None
    prize_type: str | None = None
    total_prize: str | None = None


class CompetitionsSearchList(Pagination):
    """Response from GET /search/hubs endpoint."""

    items: list[CompetitionSearch]
