"""Match, match statistics and match history models."""

from typing import Any

from pydantic import Field

from faceit.models.base import FaceitModel, Pagination

# =============================================================================
# Match Details
# =============================================================================


class MatchResult(FaceitModel):
    """Final score of a match, keyed by faction."""

    score: dict[str, int] | None = None
    winner: str | None = None


class FactionResult(FaceitModel):
    """Score of one faction in a single map of a series."""

    score: int


class DetailedMatchResult(FaceitModel):
    """Per-map result of a match."""

    asc_score: bool | None = None
    factions: dict[str, FactionResult] | None = None
    winner: str | None = None


class SkillLevelRange(FaceitModel):
    """Skill level bounds of a faction."""

    min: int | None = None
    max: int | None = None


class SkillLevel(FaceitModel):
    """Skill level summary of a faction."""

    average: int | None = None
    range: SkillLevelRange | None = None


class Stats(FaceitModel):
    """Faction rating statistics (camelCase on the wire)."""

    rating: int | None = None
    skill_level: SkillLevel | None = Field(default=None, alias="skillLevel")
    win_probability: float | None = Field(default=None, alias="winProbability")


class Roster(FaceitModel):
    """A player in a faction roster."""

    player_id: str
    nickname: str
    avatar: str | None = None
    game_player_id: str | None = None
    game_player_name: str | None = None
    game_skill_level: int | None = None
    anticheat_required: bool | None = None
    membership: str | None = None


class Faction(FaceitModel):
    """One side of a match."""

    faction_id: str | None = None
    leader: str | None = None
    avatar: str | None = None
    name: str | None = None
    faction_type: str | None = Field(default=None, alias="type")
    roster: list[Roster] | None = None
    stats: Stats | None = None
    substituted: bool | None = None


class Match(FaceitModel):
    """Response from GET /matches/{match_id} endpoint."""

    match_id: str
    game: str
    status: str
    region: str | None = None
    competition_id: str | None = None
    competition_type: str | None = None
    competition_name: str | None = None
    organizer_id: str | None = None
    # Keyed by faction name ("faction1", "faction2")
    teams: dict[str, Faction] | None = None
    started_at: int | None = None
    finished_at: int | None = None
    scheduled_at: int | None = None
    configured_at: int | None = None
    best_of: int | None = None
    results: MatchResult | None = None
    detailed_results: list[DetailedMatchResult] | None = None
    round: int | None = None
    group: int | None = None
    faceit_url: str | None = None
    chat_room_id: str | None = None
    demo_url: list[str] | None = None
    calculate_elo: bool | None = None
    broadcast_start_time: int | None = None
    broadcast_start_time_label: str | None = None
    version: int | None = None
    voting: Any = None


class MatchesList(Pagination):
    """Response from hub and championship match listings."""

    items: list[Match]


# =============================================================================
# Match Statistics
# =============================================================================


class PlayerStatsSimple(FaceitModel):
    """Per-player statistics inside a round."""

    player_id: str | None = None
    nickname: str | None = None
    player_stats: dict[str, Any] | None = None


class TeamStatsSimple(FaceitModel):
    """Per-team statistics inside a round."""

    team_id: str | None = None
    premade: bool | None = None
    team_stats: dict[str, Any] | None = None
    players: list[PlayerStatsSimple] | None = None


class RoundStats(FaceitModel):
    """Statistics for one round (map) of a match."""

    match_id: str | None = None
    game_id: str | None = None
    competition_id: str | None = None
    game_mode: str | None = None
    match_round: int | None = None
    played: int | None = None
    best_of: int | None = None
    round_stats: dict[str, Any] | None = None
    teams: list[TeamStatsSimple] | None = None


class MatchStats(FaceitModel):
    """Response from GET /matches/{match_id}/stats endpoint."""

    rounds: list[RoundStats]


# =============================================================================
# Match History
# =============================================================================


class MatchHistoryPlayer(FaceitModel):
    """A player as listed in a history entry."""

    player_id: str
    nickname: str
    avatar: str | None = None
    faceit_url: str | None = None
    game_player_id: str | None = None
    game_player_name: str | None = None
    skill_level: int | None = None


class HistoryFaction(FaceitModel):
    """A faction as listed in a history entry."""

    team_id: str | None = None
    nickname: str | None = None
    avatar: str | None = None
    faction_type: str | None = Field(default=None, alias="type")
    players: list[MatchHistoryPlayer] | None = None


class MatchHistory(FaceitModel):
    """A single entry of a player's match history."""

    match_id: str
    game_id: str
    status: str
    region: str | None = None
    match_type: str | None = None
    game_mode: str | None = None
    max_players: int | None = None
    teams_size: int | None = None
    teams: dict[str, HistoryFaction] | None = None
    playing_players: list[str] | None = None
    competition_id: str | None = None
    competition_name: str | None = None
    competition_type: str | None = None
    organizer_id: str | None = None
    started_at: int | None = None
    finished_at: int | None = None
    results: MatchResult | None = None
    faceit_url: str | None = None


class MatchHistoryList(Pagination):
    """Response from GET /players/{player_id}/history endpoint."""

    from_: int | None = Field(default=None, alias="from")
    to: int | None = None
    items: list[MatchHistory]
