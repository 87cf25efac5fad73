"""Main CLI application and entry point.

This module defines the main Typer application, resolves the client
configuration shared by all commands, and aggregates the command groups
(player, match, search, ranking, config).
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from faceit.cli.commands import config as config_commands
from faceit.cli.commands import match as match_commands
from faceit.cli.commands import player as player_commands
from faceit.cli.commands import ranking as ranking_commands
from faceit.cli.commands import search as search_commands
from faceit.cli.session import CLISession, setup_logging
from faceit.cli.utils.output import print_error
from faceit.config import ClientConfig

app = typer.Typer(
    name="faceit",
    help="Command-line client for the FACEIT Data API",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

# Add command groups
app.add_typer(player_commands.app, name="player", help="Player profiles and history")
app.add_typer(match_commands.app, name="match", help="Match details and statistics")
app.add_typer(search_commands.app, name="search", help="Search players, teams and hubs")
app.add_typer(ranking_commands.app, name="ranking", help="Regional leaderboards")
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


def resolve_config(
    config_path: Path | None,
    api_key: str | None,
    base_url: str | None,
    timeout: float | None,
) -> ClientConfig:
    """Merge the config file with environment and command-line overrides.

    Precedence: command-line flag > environment variable > config file >
    defaults. Typer already folds the environment into the flag values.
    """
    base = ClientConfig.from_yaml(config_path) if config_path else ClientConfig()
    overrides = {
        key: value
        for key, value in {
            "api_key": api_key,
            "base_url": base_url,
            "timeout": timeout,
        }.items()
        if value is not None
    }
    return ClientConfig.model_validate({**base.model_dump(), **overrides})


@app.callback()
def main_callback(
    ctx: typer.Context,
    api_key: Annotated[
        str | None,
        typer.Option(
            "--api-key",
            envvar="FACEIT_API_KEY",
            help="API key or OAuth2 access token",
            show_default=False,
        ),
    ] = None,
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", envvar="FACEIT_BASE_URL", help="API host"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", envvar="FACEIT_TIMEOUT", help="Timeout in seconds"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print raw JSON instead of tables"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """FACEIT Data API command-line client.

    Use the subcommands to look up players, matches, search results and
    leaderboards.
    """
    setup_logging(verbose)

    try:
        config = resolve_config(config_path, api_key, base_url, timeout)
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    ctx.obj = CLISession(config=config, json_output=json_output)


if __name__ == "__main__":
    app()
