"""CLI module for the FACEIT Data API client.

This module provides command-line tools for looking up players, matches,
search results and leaderboards, and for managing client configuration.

Usage:
    python -m faceit.cli --help
    python -m faceit.cli player get <player-id>
    python -m faceit.cli --json search players s1mple
"""

from faceit.cli.main import app

__all__ = ["app"]
