"""Player models.

Covers the player profile, per-game statistics and bans.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from faceit.models.base import FaceitModel, Pagination

# =============================================================================
# Player Profile
# =============================================================================


class GameDetail(FaceitModel):
    """Per-game profile information for a player."""

    faceit_elo: int | None = None
    game_player_id: str | None = None
    game_player_name: str | None = None
    game_profile_id: str | None = None
    region: str | None = None
    regions: list[str] | None = None
    skill_level: int | None = None
    skill_level_label: str | None = None


class UserSettings(FaceitModel):
    """Player account settings."""

    language: str | None = None


class Player(FaceitModel):
    """Response from GET /players/{player_id} and GET /players endpoints."""

    player_id: str
    nickname: str
    avatar: str | None = None
    country: str | None = None
    faceit_url: str | None = None
    steam_id_64: str | None = None
    steam_nickname: str | None = None
    new_steam_id: str | None = None
    memberships: list[str] | None = None
    # Keyed by game id (e.g. "cs2")
    games: dict[str, GameDetail] | None = None
    verified: bool | None = None
    activated_at: datetime | None = None
    cover_image: str | None = None
    friends_ids: list[str] | None = None
    platforms: dict[str, str] | None = None
    settings: UserSettings | None = None


# =============================================================================
# Player Stats
# =============================================================================


class PlayerStats(FaceitModel):
    """Response from GET /players/{player_id}/stats/{game_id} endpoint.

    The ``lifetime`` and ``segments`` payloads differ per game and are kept
    as plain JSON values.
    """

    player_id: str
    game_id: str
    lifetime: dict[str, Any] | None = None
    segments: list[dict[str, Any]] | None = None


# =============================================================================
# Player Bans
# =============================================================================


class PlayerBan(FaceitModel):
    """A single ban entry."""

    user_id: str
    nickname: str
    game: str
    starts_at: datetime
    ends_at: datetime
    ban_type: str = Field(alias="type")
    reason: str


class PlayerBansList(Pagination):
    """Response from GET /players/{player_id}/bans endpoint."""

    items: list[PlayerBan]
