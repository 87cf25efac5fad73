"""Player subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from faceit.cli.session import get_session, run_call
from faceit.cli.utils.output import (
    console,
    create_history_table,
    create_player_panel,
    create_player_stats_table,
    print_error,
    print_json,
)

app = typer.Typer(no_args_is_help=True)


@app.command("get")
def get_player(
    ctx: typer.Context,
    player_id: Annotated[str, typer.Argument(help="FACEIT player ID")],
) -> None:
    """Show a player's profile.

    Examples:
        faceit player get 5ea07280-2399-4c7e-88ab-f2f7db0c449f
    """
    player = run_call(ctx, lambda client: client.get_player(player_id))

    if get_session(ctx).json_output:
        print_json(player)
        return
    console.print(create_player_panel(player))


@app.command("lookup")
def lookup_player(
    ctx: typer.Context,
    nickname: Annotated[
        str | None, typer.Option("--nickname", "-n", help="FACEIT nickname")
    ] = None,
    game: Annotated[str | None, typer.Option("--game", "-g", help="Game ID")] = None,
    game_player_id: Annotated[
        str | None,
        typer.Option("--game-player-id", help="In-game player identifier"),
    ] = None,
) -> None:
    """Find a player by nickname or by in-game identifier.

    Examples:
        faceit player lookup --nickname s1mple
        faceit player lookup --game cs2 --game-player-id 76561198034202275
    """
    if nickname is None and game_player_id is None:
        print_error("Provide --nickname or --game-player-id")
        raise typer.Exit(1)

    player = run_call(
        ctx,
        lambda client: client.get_player_from_lookup(
            nickname=nickname, game=game, game_player_id=game_player_id
        ),
    )

    if get_session(ctx).json_output:
        print_json(player)
        return
    console.print(create_player_panel(player))


@app.command("stats")
def player_stats(
    ctx: typer.Context,
    player_id: Annotated[str, typer.Argument(help="FACEIT player ID")],
    game_id: Annotated[str, typer.Argument(help="Game ID (e.g. cs2)")],
) -> None:
    """Show a player's lifetime statistics for a game."""
    stats = run_call(ctx, lambda client: client.get_player_stats(player_id, game_id))

    if get_session(ctx).json_output:
        print_json(stats)
        return
    console.print(create_player_stats_table(stats))


@app.command("history")
def player_history(
    ctx: typer.Context,
    player_id: Annotated[str, typer.Argument(help="FACEIT player ID")],
    game: Annotated[str, typer.Option("--game", "-g", help="Game ID")] = "cs2",
    from_: Annotated[
        int | None, typer.Option("--from", help="Start timestamp (unix time)")
    ] = None,
    to: Annotated[
        int | None, typer.Option("--to", help="End timestamp (unix time)")
    ] = None,
    offset: Annotated[int | None, typer.Option("--offset", help="Page offset")] = None,
    limit: Annotated[int | None, typer.Option("--limit", help="Page size")] = None,
) -> None:
    """Show a player's match history.

    Examples:
        faceit player history <player-id> --game cs2 --limit 20
    """
    history = run_call(
        ctx,
        lambda client: client.get_player_history(
            player_id, game, from_=from_, to=to, offset=offset, limit=limit
        ),
    )

    if get_session(ctx).json_output:
        print_json(history)
        return
    if not history.items:
        console.print("[dim]No matches found[/dim]")
        return
    console.print(create_history_table(history))
