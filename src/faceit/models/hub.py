"""Hub models."""

from typing import Any

from faceit.models.base import FaceitModel, Pagination
from faceit.models.game import Game
from faceit.models.organizer import Organizer


class Hub(FaceitModel):
    """Response from GET /hubs/{hub_id} endpoint.

    ``game_data`` and ``organizer_data`` are only present when requested
    through the ``expanded`` query parameter.
    """

    hub_id: str
    name: str
    game_id: str
    organizer_id: str
    avatar: str | None = None
    game_data: Game | None = None
    organizer_data: Organizer | None = None
    region: str | None = None
    description: str | None = None
    faceit_url: str | None = None
    cover_image: str | None = None
    background_image: str | None = None
    chat_room_id: str | None = None
    join_permission: str | None = None
    min_skill_level: int | None = None
    max_skill_level: int | None = None
    players_joined: int | None = None
    rule_id: str | None = None


class HubsList(Pagination):
    """Response from GET /players/{player_id}/hubs endpoint."""

    items: list[Hub]


class HubUser(FaceitModel):
    """A hub member."""

    user_id: str
    nickname: str
    avatar: str | None = None
    faceit_url: str | None = None
    roles: list[str] | None = None


class HubMembers(Pagination):
    """Response from GET /hubs/{hub_id}/members endpoint."""

    items: list[HubUser]


class StatsCompetitionPlayer(FaceitModel):
    """Leaderboard statistics of one player in a competition."""

    player_id: str
    nickname: str
    stats: Any


class HubStats(FaceitModel):
    """Response from GET /hubs/{hub_id}/stats endpoint."""

    game_id: str
    players: list[StatsCompetitionPlayer]
