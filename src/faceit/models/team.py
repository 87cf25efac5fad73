"""Team models."""

from typing import Any

from faceit.models.base import FaceitModel, Pagination


class UserSimple(FaceitModel):
    """A team member."""

    user_id: str
    nickname: str
    avatar: str | None = None
    country: str | None = None
    faceit_url: str | None = None
    membership_type: str | None = None
    memberships: list[str] | None = None
    skill_level: int | None = None


class Team(FaceitModel):
    """A FACEIT team."""

    team_id: str
    name: str
    nickname: str
    avatar: str | None = None
    cover_image: str | None = None
    description: str | None = None
    game: str | None = None
    leader: str | None = None
    members: list[UserSimple] | None = None
    faceit_url: str | None = None
    chat_room_id: str | None = None
    twitter: str | None = None
    youtube: str | None = None
    facebook: str | None = None
    website: str | None = None
    team_type: str | None = None


class TeamStats(FaceitModel):
    """Lifetime and per-segment statistics of a team."""

    team_id: str
    game_id: str
    lifetime: dict[str, Any] | None = None
    segments: list[dict[str, Any]] | None = None


class TeamList(Pagination):
    """Response from GET /players/{player_id}/teams endpoint."""

    items: list[Team]
