"""Match subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from faceit.cli.session import get_session, run_call
from faceit.cli.utils.output import (
    console,
    create_match_panel,
    create_match_stats_table,
    print_json,
)

app = typer.Typer(no_args_is_help=True)


@app.command("get")
def get_match(
    ctx: typer.Context,
    match_id: Annotated[str, typer.Argument(help="FACEIT match ID")],
) -> None:
    """Show match details and rosters."""
    match = run_call(ctx, lambda client: client.get_match(match_id))

    if get_session(ctx).json_output:
        print_json(match)
        return
    console.print(create_match_panel(match))


@app.command("stats")
def match_stats(
    ctx: typer.Context,
    match_id: Annotated[str, typer.Argument(help="FACEIT match ID")],
) -> None:
    """Show per-round statistics of a match."""
    stats = run_call(ctx, lambda client: client.get_match_stats(match_id))

    if get_session(ctx).json_output:
        print_json(stats)
        return
    console.print(create_match_stats_table(stats))
