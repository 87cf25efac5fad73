"""Tournament models."""

from typing import Any

from faceit.models.base import FaceitModel, Pagination
from faceit.models.game import Game
from faceit.models.organizer import Organizer


class Tournament(FaceitModel):
    """Full tournament description."""

    tournament_id: str
    name: str
    game_id: str
    organizer_id: str
    status: str
    # Deprecated upstream in favour of tournament_id
    competition_id: str | None = None
    description: str | None = None
    game_data: Game | None = None
    organizer_data: Organizer | None = None
    region: str | None = None
    started_at: int | None = None
    faceit_url: str | None = None
    cover_image: str | None = None
    featured_image: str | None = None
    anticheat_required: bool | None = None
    calculate_elo: bool | None = None
    best_of: int | None = None
    match_type: str | None = None
    invite_type: str | None = None
    membership_type: str | None = None
    min_skill: int | None = None
    max_skill: int | None = None
    number_of_players: int | None = None
    number_of_players_joined: int | None = None
    number_of_players_checkedin: int | None = None
    number_of_players_participants: int | None = None
    team_size: int | None = None
    substitutes_allowed: int | None = None
    substitutions_allowed: int | None = None
    total_prize: str | None = None
    prize_type: str | None = None
    custom: bool | None = None
    rule: str | None = None
    rounds: list[Any] | None = None
    voting: Any = None
    whitelist_countries: list[str] | None = None


class TournamentSimple(FaceitModel):
    """Tournament summary returned in list responses."""

    tournament_id: str
    name: str
    game_id: str
    status: str
    organizer_id: str
    region: str | None = None
    started_at: int | None = None
    faceit_url: str | None = None
    featured_image: str | None = None
    anticheat_required: bool | None = None
    custom: bool | None = None
    match_type: str | None = None
    invite_type: str | None = None
    membership_type: str | None = None
    min_skill: int | None = None
    max_skill: int | None = None
    number_of_players: int | None = None
    number_of_players_joined: int | None = None
    number_of_players_checkedin: int | None = None
    number_of_players_participants: int | None = None
    team_size: int | None = None
    total_prize: str | None = None
    prize_type: str | None = None
    subscriptions_count: int | None = None
    whitelist_countries: list[str] | None = None


class TournamentsList(Pagination):
    """Response from GET /players/{player_id}/tournaments endpoint."""

    items: list[TournamentSimple]
