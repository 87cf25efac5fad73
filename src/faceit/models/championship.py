"""Championship models."""

from pydantic import Field

from faceit.models.base import FaceitModel, Pagination
from faceit.models.game import Game
from faceit.models.organizer import Organizer


class Prize(FaceitModel):
    """A prize awarded for a final rank."""

    rank: int
    faceit_points: int | None = None


class JoinCheck(FaceitModel):
    """Eligibility requirements for joining a championship."""

    join_policy: str | None = None
    membership_type: str | None = None
    min_skill_level: int | None = None
    max_skill_level: int | None = None
    allowed_team_types: list[str] | None = None
    whitelist_geo_countries: list[str] | None = None
    whitelist_geo_countries_min_players: int | None = None
    blacklist_geo_countries: list[str] | None = None


class ChampionshipSchedule(FaceitModel):
    """Scheduled date of a championship round."""

    date: int
    status: str


class ChampionshipScreening(FaceitModel):
    """Screening settings of a championship."""

    enabled: bool
    id: str


class ChampionshipStream(FaceitModel):
    """Stream settings of a championship."""

    active: bool
    platform: str | None = None
    source: str | None = None
    title: str | None = None


class SubstitutionConfiguration(FaceitModel):
    """Substitution limits of a championship."""

    max_substitutes: int | None = None
    max_substitutions: int | None = None


class Championship(FaceitModel):
    """Response from GET /championships/{championship_id} endpoint."""

    championship_id: str
    name: str
    game_id: str
    organizer_id: str
    status: str
    # Deprecated upstream in favour of championship_id
    id: str | None = None
    description: str | None = None
    game_data: Game | None = None
    organizer_data: Organizer | None = None
    region: str | None = None
    avatar: str | None = None
    cover_image: str | None = None
    background_image: str | None = None
    faceit_url: str | None = None
    championship_start: int | None = None
    subscription_start: int | None = None
    subscription_end: int | None = None
    checkin_start: int | None = None
    checkin_clear: int | None = None
    checkin_enabled: bool | None = None
    current_subscriptions: int | None = None
    slots: int | None = None
    full: bool | None = None
    subscriptions_locked: bool | None = None
    featured: bool | None = None
    anticheat_required: bool | None = None
    prizes: list[Prize] | None = None
    total_prizes: int | None = None
    total_rounds: int | None = None
    total_groups: int | None = None
    seeding_strategy: str | None = None
    rules_id: str | None = None
    join_checks: JoinCheck | None = None
    # Keyed by round number
    schedule: dict[str, ChampionshipSchedule] | None = None
    screening: ChampionshipScreening | None = None
    stream: ChampionshipStream | None = None
    substitution_configuration: SubstitutionConfiguration | None = None
    championship_type: str | None = Field(default=None, alias="type")


class ChampionshipsList(Pagination):
    """Response from GET /championships endpoint."""

    items: list[Championship]
