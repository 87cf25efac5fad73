"""Shared fixtures and utilities for faceit tests.

This module provides:
- Sample response payloads for the most used endpoints
- A helper that builds a client whose requests are answered in-process
- Custom markers for test categorization
"""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from faceit.client import FaceitClient
from faceit.config import ClientConfig

TEST_BASE_URL = "https://api.test"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests requiring network"
    )


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    api_key: str | None = "test-key",
) -> FaceitClient:
    """Create a client whose requests are answered by ``handler``."""
    config = ClientConfig(base_url=TEST_BASE_URL, api_key=api_key)
    return FaceitClient(config, transport=httpx.MockTransport(handler))


def json_handler(
    payload: Any,
    status_code: int = 200,
    seen: list[httpx.Request] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Return a handler answering every request with ``payload``.

    Requests are appended to ``seen`` when given.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return handler


@pytest.fixture
def player_data() -> dict[str, Any]:
    """A player profile as returned by GET /players/{player_id}."""
    return {
        "player_id": "p1",
        "nickname": "foo",
        "avatar": "https://cdn.test/avatar.png",
        "country": "de",
        "faceit_url": "https://www.faceit.com/{lang}/players/foo",
        "verified": True,
        "activated_at": "2020-05-01T12:00:00Z",
        "games": {
            "cs2": {
                "faceit_elo": 2100,
                "game_player_id": "76561198000000000",
                "game_player_name": "foo",
                "region": "EU",
                "skill_level": 10,
            }
        },
        "settings": {"language": "en"},
    }


@pytest.fixture
def match_data() -> dict[str, Any]:
    """A match as returned by GET /matches/{match_id}."""
    return {
        "match_id": "m1",
        "game": "cs2",
        "status": "FINISHED",
        "region": "EU",
        "competition_name": "Europe 5v5 Queue",
        "started_at": 1700000000,
        "finished_at": 1700003600,
        "teams": {
            "faction1": {
                "faction_id": "f1",
                "name": "team_foo",
                "type": "",
                "roster": [{"player_id": "p1", "nickname": "foo"}],
                "stats": {
                    "rating": 2000,
                    "skillLevel": {"average": 9, "range": {"min": 8, "max": 10}},
                    "winProbability": 0.55,
                },
            },
            "faction2": {
                "faction_id": "f2",
                "name": "team_bar",
                "roster": [{"player_id": "p2", "nickname": "bar"}],
            },
        },
        "results": {"score": {"faction1": 1, "faction2": 0}, "winner": "faction1"},
        "detailed_results": [
            {
                "asc_score": True,
                "winner": "faction1",
                "factions": {"faction1": {"score": 1}, "faction2": {"score": 0}},
            }
        ],
    }


@pytest.fixture
def history_data() -> dict[str, Any]:
    """A page of match history as returned by GET /players/{id}/history."""
    return {
        "start": 0,
        "end": 1,
        "from": 1690000000,
        "to": 1700000000,
        "items": [
            {
                "match_id": "m1",
                "game_id": "cs2",
                "status": "finished",
                "competition_name": "Europe 5v5 Queue",
                "finished_at": 1700003600,
                "teams": {
                    "faction1": {
                        "team_id": "f1",
                        "nickname": "team_foo",
                        "type": "",
                        "players": [{"player_id": "p1", "nickname": "foo"}],
                    }
                },
                "results": {
                    "score": {"faction1": 1, "faction2": 0},
                    "winner": "faction1",
                },
            }
        ],
    }


@pytest.fixture
def ranking_data() -> dict[str, Any]:
    """A leaderboard page as returned by GET /rankings/games/{g}/regions/{r}."""
    return {
        "start": 0,
        "end": 2,
        "items": [
            {
                "player_id": "p1",
                "nickname": "foo",
                "position": 1,
                "faceit_elo": 4000,
                "game_skill_level": 10,
                "country": "de",
            },
            {
                "player_id": "p2",
                "nickname": "bar",
                "position": 2,
                "faceit_elo": 3900,
                "game_skill_level": 10,
            },
        ],
    }
