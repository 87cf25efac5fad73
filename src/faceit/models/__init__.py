"""Pydantic models for FACEIT Data API v4 responses.

This package mirrors the upstream JSON contract: identifying fields are
mandatory, everything the API may omit is optional.

Usage:
    from faceit.models import Player, Match, MatchHistoryList
"""

# Base models
from faceit.models.base import FaceitModel, Pagination

# Championship models
from faceit.models.championship import (
    Championship,
    ChampionshipSchedule,
    ChampionshipScreening,
    ChampionshipsList,
    ChampionshipStream,
    JoinCheck,
    Prize,
    SubstitutionConfiguration,
)

# Game models
from faceit.models.game import (
    Game,
    GameAssets,
    GamesList,
    Matchmaking,
    MatchmakingList,
    MatchmakingQueue,
    MatchmakingSlim,
)

# Hub models
from faceit.models.hub import (
    Hub,
    HubMembers,
    HubsList,
    HubStats,
    HubUser,
    StatsCompetitionPlayer,
)

# Match models
from faceit.models.match import (
    DetailedMatchResult,
    Faction,
    FactionResult,
    HistoryFaction,
    Match,
    MatchesList,
    MatchHistory,
    MatchHistoryList,
    MatchHistoryPlayer,
    MatchResult,
    MatchStats,
    PlayerStatsSimple,
    Roster,
    RoundStats,
    SkillLevel,
    SkillLevelRange,
    Stats,
    TeamStatsSimple,
)
from faceit.models.organizer import Organizer

# Player models
from faceit.models.player import (
    GameDetail,
    Player,
    PlayerBan,
    PlayerBansList,
    PlayerStats,
    UserSettings,
)

# Ranking models
from faceit.models.ranking import GlobalRanking, GlobalRankingList, PlayerGlobalRanking

# Search models
from faceit.models.search import (
    CompetitionSearch,
    CompetitionsSearchList,
    GameUserSearch,
    TeamSearch,
    TeamsSearchList,
    UserSearch,
    UsersSearchList,
)

# Team models
from faceit.models.team import Team, TeamList, TeamStats, UserSimple

# Tournament models
from faceit.models.tournament import Tournament, TournamentSimple, TournamentsList

__all__ = [
    # Base
    "FaceitModel",
    "Pagination",
    # Player
    "Player",
    "GameDetail",
    "UserSettings",
    "PlayerStats",
    "PlayerBan",
    "PlayerBansList",
    # Match
    "Match",
    "MatchResult",
    "DetailedMatchResult",
    "FactionResult",
    "Faction",
    "Roster",
    "Stats",
    "SkillLevel",
    "SkillLevelRange",
    "MatchStats",
    "RoundStats",
    "TeamStatsSimple",
    "PlayerStatsSimple",
    "MatchHistory",
    "HistoryFaction",
    "MatchHistoryPlayer",
    "MatchesList",
    "MatchHistoryList",
    # Game
    "Game",
    "GameAssets",
    "GamesList",
    "Matchmaking",
    "MatchmakingQueue",
    "MatchmakingSlim",
    "MatchmakingList",
    # Hub
    "Hub",
    "HubsList",
    "HubUser",
    "HubMembers",
    "HubStats",
    "StatsCompetitionPlayer",
    # Championship
    "Championship",
    "ChampionshipsList",
    "ChampionshipSchedule",
    "ChampionshipScreening",
    "ChampionshipStream",
    "JoinCheck",
    "Prize",
    "SubstitutionConfiguration",
    # Organizer
    "Organizer",
    # Team
    "Team",
    "TeamList",
    "TeamStats",
    "UserSimple",
    # Search
    "UserSearch",
    "GameUserSearch",
    "UsersSearchList",
    "TeamSearch",
    "TeamsSearchList",
    "CompetitionSearch",
    "CompetitionsSearchList",
    # Ranking
    "GlobalRanking",
    "GlobalRankingList",
    "PlayerGlobalRanking",
    # Tournament
    "Tournament",
    "TournamentSimple",
    "TournamentsList",
]
