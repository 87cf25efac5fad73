"""Rich console output formatting utilities."""

from datetime import datetime, timezone

from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from faceit.models import (
    CompetitionsSearchList,
    GlobalRanking,
    Match,
    MatchHistoryList,
    MatchStats,
    Player,
    PlayerStats,
    TeamsSearchList,
    UsersSearchList,
)

console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_json(model: BaseModel) -> None:
    """Print a model as JSON using the API field names."""
    console.print_json(model.model_dump_json(by_alias=True, exclude_none=True))


def format_unix_timestamp(value: int | None) -> str:
    """Format a unix timestamp for display."""
    if value is None:
        return "-"
    return datetime.fromtimestamp(value, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


def create_player_panel(player: Player) -> Panel:
    """Create a detailed panel for a single player.

    Args:
        player: Player profile

    Returns:
        Rich Panel instance
    """
    lines = [
        f"[bold]Nickname:[/bold] {player.nickname}",
        f"[bold]Player ID:[/bold] {player.player_id}",
        f"[bold]Country:[/bold] {player.country or '-'}",
        f"[bold]Verified:[/bold] {'yes' if player.verified else 'no'}",
    ]
    if player.faceit_url:
        lines.append(f"[bold]Profile:[/bold] {player.faceit_url}")

    for game_id, detail in sorted((player.games or {}).items()):
        elo = detail.faceit_elo if detail.faceit_elo is not None else "-"
        level = detail.skill_level if detail.skill_level is not None else "-"
        lines.append(f"[bold]{game_id}:[/bold] level {level}, elo {elo}")

    return Panel("\n".join(lines), title=f"Player: {player.nickname}")


def create_player_stats_table(stats: PlayerStats) -> Table:
    """Create a table of a player's lifetime statistics."""
    table = Table(title=f"Lifetime stats ({stats.game_id})")
    table.add_column("Stat", style="bold")
    table.add_column("Value", justify="right", style="cyan")

    for name, value in (stats.lifetime or {}).items():
        if isinstance(value, (list, dict)):
            continue
        table.add_row(name, str(value))

    return table


def create_history_table(history: MatchHistoryList) -> Table:
    """Create a table of match history entries."""
    table = Table(title="Match History")

    table.add_column("Match ID", style="cyan", no_wrap=True)
    table.add_column("Competition")
    table.add_column("Status")
    table.add_column("Winner", style="green")
    table.add_column("Finished", no_wrap=True)

    for entry in history.items:
        winner = entry.results.winner if entry.results else None
        table.add_row(
            entry.match_id,
            entry.competition_name or "-",
            entry.status,
            winner or "-",
            format_unix_timestamp(entry.finished_at),
        )

    return table


def create_match_panel(match: Match) -> Panel:
    """Create a detailed panel for a single match."""
    lines = [
        f"[bold]Match ID:[/bold] {match.match_id}",
        f"[bold]Game:[/bold] {match.game}",
        f"[bold]Status:[/bold] {match.status}",
        f"[bold]Competition:[/bold] {match.competition_name or '-'}",
        f"[bold]Started:[/bold] {format_unix_timestamp(match.started_at)}",
        f"[bold]Finished:[/bold] {format_unix_timestamp(match.finished_at)}",
    ]

    for faction_id, faction in sorted((match.teams or {}).items()):
        players = ", ".join(r.nickname for r in faction.roster or [])
        lines.append(f"[bold]{faction.name or faction_id}:[/bold] {players or '-'}")

    if match.results is not None:
        score = match.results.score or {}
        score_text = " - ".join(str(v) for _, v in sorted(score.items()))
        winner = match.results.winner or "-"
        lines.append(f"[bold]Result:[/bold] {score_text or '-'} (winner: {winner})")

    return Panel("\n".join(lines), title=f"Match: {match.match_id}")


def create_match_stats_table(stats: MatchStats) -> Table:
    """Create a table summarizing each round of a match."""
    table = Table(title="Match Stats")
    table.add_column("Round", justify="right")
    table.add_column("Mode")
    table.add_column("Map")
    table.add_column("Score")

    for index, round_stats in enumerate(stats.rounds, start=1):
        details = round_stats.round_stats or {}
        table.add_row(
            str(round_stats.match_round or index),
            round_stats.game_mode or "-",
            str(details.get("Map", "-")),
            str(details.get("Score", "-")),
        )

    return table


def create_player_search_table(results: UsersSearchList) -> Table:
    """Create a table of player search results."""
    table = Table(title="Players")
    table.add_column("Nickname", style="cyan", no_wrap=True)
    table.add_column("Player ID", no_wrap=True)
    table.add_column("Country")
    table.add_column("Games")

    for user in results.items:
        games = ", ".join(f"{g.name} ({g.skill_level})" for g in user.games or [])
        table.add_row(user.nickname, user.player_id, user.country or "-", games or "-")

    return table


def create_team_search_table(results: TeamsSearchList) -> Table:
    """Create a table of team search results."""
    table = Table(title="Teams")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Team ID", no_wrap=True)
    table.add_column("Game")
    table.add_column("Verified")

    for team in results.items:
        table.add_row(
            team.name,
            team.team_id,
            team.game or "-",
            "yes" if team.verified else "no",
        )

    return table


def create_hub_search_table(results: CompetitionsSearchList) -> Table:
    """Create a table of hub search results."""
    table = Table(title="Hubs")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Hub ID", no_wrap=True)
    table.add_column("Game")
    table.add_column("Region")
    table.add_column("Members", justify="right")

    for hub in results.items:
        members = hub.number_of_members
        table.add_row(
            hub.name,
            hub.competition_id,
            hub.game or "-",
            hub.region or "-",
            str(members) if members is not None else "-",
        )

    return table


def create_ranking_table(rankings: list[GlobalRanking], title: str) -> Table:
    """Create a leaderboard table."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="magenta")
    table.add_column("Nickname", style="cyan", no_wrap=True)
    table.add_column("Elo", justify="right", style="green")
    table.add_column("Level", justify="right")
    table.add_column("Country")

    for entry in rankings:
        table.add_row(
            str(entry.position),
            entry.nickname,
            str(entry.faceit_elo),
            str(entry.game_skill_level),
            entry.country or "-",
        )

    return table
