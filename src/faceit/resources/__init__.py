"""Identity-bound handles over ``FaceitClient``.

Each handle stores one resource ID and a reference to the client, and
forwards every call to the client with that ID filled in.

Usage:
    player = client.player("player-id")
    profile = await player.get()
"""

from faceit.resources.championship import ChampionshipResource
from faceit.resources.game import GameResource
from faceit.resources.hub import HubResource
from faceit.resources.match import MatchResource
from faceit.resources.player import PlayerResource

__all__ = [
    "ChampionshipResource",
    "GameResource",
    "HubResource",
    "MatchResource",
    "PlayerResource",
]
