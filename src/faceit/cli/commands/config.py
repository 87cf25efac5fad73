"""Config subcommands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError

from faceit.cli.session import get_session
from faceit.cli.utils.output import console, print_error, print_success, print_warning
from faceit.config import ClientConfig

app = typer.Typer(no_args_is_help=True)


def _mask(secret: str | None) -> str:
    if not secret:
        return "[dim]not set[/dim]"
    if len(secret) <= 8:
        return "****"
    return f"{secret[:4]}…{secret[-4:]}"


@app.command("show")
def show(ctx: typer.Context) -> None:
    """Show the effective client configuration.

    The API key is masked.
    """
    config = get_session(ctx).config
    console.print(f"[bold]Base URL:[/bold] {config.base_url}")
    console.print(f"[bold]API key:[/bold] {_mask(config.api_key)}")
    console.print(f"[bold]Timeout:[/bold] {config.timeout}s")


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a client configuration file.

    Checks that the YAML file is valid and all values are acceptable.

    Examples:
        faceit config validate faceit.yaml
    """
    try:
        with open(config_path) as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)

    if raw_data is None:
        print_error("Configuration file is empty")
        raise typer.Exit(1)

    if not isinstance(raw_data, dict):
        print_error("Configuration must be a YAML mapping (dictionary)")
        raise typer.Exit(1)

    try:
        config = ClientConfig.model_validate(raw_data)
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    unknown = sorted(set(raw_data) - set(ClientConfig.model_fields))
    print_success(f"Configuration is valid: {config_path}")

    if unknown:
        print_warning(f"Unknown keys ignored: {', '.join(unknown)}")
    if config.api_key is None:
        print_warning("No api_key set - requests will be sent unauthenticated")


@app.command("init")
def init(
    ctx: typer.Context,
    config_path: Annotated[
        Path,
        typer.Argument(help="Where to write the configuration file", dir_okay=False),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Write the effective configuration to a YAML file."""
    if config_path.exists() and not force:
        print_error(f"{config_path} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    get_session(ctx).config.to_yaml(config_path)
    print_success(f"Configuration written to {config_path}")
