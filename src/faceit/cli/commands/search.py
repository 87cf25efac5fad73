"""Search subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from faceit.cli.session import get_session, run_call
from faceit.cli.utils.output import (
    console,
    create_hub_search_table,
    create_player_search_table,
    create_team_search_table,
    print_json,
)

app = typer.Typer(no_args_is_help=True)

GameOption = Annotated[str | None, typer.Option("--game", "-g", help="Game ID")]
OffsetOption = Annotated[int | None, typer.Option("--offset", help="Page offset")]
LimitOption = Annotated[int | None, typer.Option("--limit", help="Page size")]


@app.command("players")
def search_players(
    ctx: typer.Context,
    nickname: Annotated[str, typer.Argument(help="Nickname to search for")],
    game: GameOption = None,
    country: Annotated[
        str | None, typer.Option("--country", help="ISO 3166-1 country code")
    ] = None,
    offset: OffsetOption = None,
    limit: LimitOption = None,
) -> None:
    """Search players by nickname."""
    results = run_call(
        ctx,
        lambda client: client.search_players(
            nickname, game=game, country=country, offset=offset, limit=limit
        ),
    )

    if get_session(ctx).json_output:
        print_json(results)
        return
    if not results.items:
        console.print("[dim]No players found[/dim]")
        return
    console.print(create_player_search_table(results))


@app.command("teams")
def search_teams(
    ctx: typer.Context,
    nickname: Annotated[str, typer.Argument(help="Team nickname to search for")],
    game: GameOption = None,
    offset: OffsetOption = None,
    limit: LimitOption = None,
) -> None:
    """Search teams by nickname."""
    results = run_call(
        ctx,
        lambda client: client.search_teams(
            nickname, game=game, offset=offset, limit=limit
        ),
    )

    if get_session(ctx).json_output:
        print_json(results)
        return
    if not results.items:
        console.print("[dim]No teams found[/dim]")
        return
    console.print(create_team_search_table(results))


@app.command("hubs")
def search_hubs(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Hub name to search for")],
    game: GameOption = None,
    region: Annotated[str | None, typer.Option("--region", help="Region")] = None,
    offset: OffsetOption = None,
    limit: LimitOption = None,
) -> None:
    """Search hubs by name."""
    results = run_call(
        ctx,
        lambda client: client.search_hubs(
            name, game=game, region=region, offset=offset, limit=limit
        ),
    )

    if get_session(ctx).json_output:
        print_json(results)
        return
    if not results.items:
        console.print("[dim]No hubs found[/dim]")
        return
    console.print(create_hub_search_table(results))
