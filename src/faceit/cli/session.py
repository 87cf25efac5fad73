"""Shared CLI state and the helper that runs one client call.

The root callback resolves the client configuration once and stores it on
the Typer context; every command then runs its API call through
``run_call``, which owns the event loop, the client lifetime and the
mapping of client errors to exit codes.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import typer

from faceit.cli.utils.output import print_error
from faceit.client import FaceitClient, FaceitError
from faceit.config import ClientConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class CLISession:
    """Options resolved by the root command."""

    config: ClientConfig
    json_output: bool = False


def setup_logging(verbose: bool) -> None:
    """Configure root logging for the CLI process."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def get_session(ctx: typer.Context) -> CLISession:
    """Return the session stored by the root callback."""
    session = ctx.find_root().obj
    if not isinstance(session, CLISession):
        return CLISession(config=ClientConfig.from_env())
    return session


def run_call(ctx: typer.Context, call: Callable[[FaceitClient], Awaitable[T]]) -> T:
    """Run one API call with a short-lived client.

    Args:
        ctx: Typer context carrying the CLISession.
        call: Coroutine function receiving the connected client.

    Returns:
        Whatever ``call`` returns.

    Raises:
        typer.Exit: With code 1 when the call raises a FaceitError.
    """
    session = get_session(ctx)

    async def _run() -> T:
        async with FaceitClient(session.config) as client:
            return await call(client)

    try:
        return asyncio.run(_run())
    except FaceitError as e:
        logger.debug("API call failed", exc_info=True)
        print_error(str(e))
        raise typer.Exit(1)
