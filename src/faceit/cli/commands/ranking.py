"""Ranking subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from faceit.cli.session import get_session, run_call
from faceit.cli.utils.output import console, create_ranking_table, print_json

app = typer.Typer(no_args_is_help=True)


@app.command("global")
def global_ranking(
    ctx: typer.Context,
    game_id: Annotated[str, typer.Argument(help="Game ID (e.g. cs2)")],
    region: Annotated[str, typer.Argument(help="Region (e.g. EU)")],
    country: Annotated[
        str | None, typer.Option("--country", help="ISO 3166-1 country code")
    ] = None,
    offset: Annotated[int | None, typer.Option("--offset", help="Page offset")] = None,
    limit: Annotated[int | None, typer.Option("--limit", help="Page size")] = None,
) -> None:
    """Show the regional leaderboard of a game.

    Examples:
        faceit ranking global cs2 EU --limit 10
    """
    ranking = run_call(
        ctx,
        lambda client: client.get_global_ranking(
            game_id, region, country=country, offset=offset, limit=limit
        ),
    )

    if get_session(ctx).json_output:
        print_json(ranking)
        return
    console.print(create_ranking_table(ranking.items, f"{game_id} {region} leaderboard"))


@app.command("player")
def player_ranking(
    ctx: typer.Context,
    game_id: Annotated[str, typer.Argument(help="Game ID (e.g. cs2)")],
    region: Annotated[str, typer.Argument(help="Region (e.g. EU)")],
    player_id: Annotated[str, typer.Argument(help="FACEIT player ID")],
    country: Annotated[
        str | None, typer.Option("--country", help="ISO 3166-1 country code")
    ] = None,
    limit: Annotated[int | None, typer.Option("--limit", help="Page size")] = None,
) -> None:
    """Show the leaderboard around a player."""
    ranking = run_call(
        ctx,
        lambda client: client.get_player_ranking(
            game_id, region, player_id, country=country, limit=limit
        ),
    )

    if get_session(ctx).json_output:
        print_json(ranking)
        return
    console.print(f"[bold]Position:[/bold] {ranking.position}")
    console.print(create_ranking_table(ranking.items, f"{game_id} {region} leaderboard"))
