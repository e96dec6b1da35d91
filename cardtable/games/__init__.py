"""
Games module - Rule engines for the supported card games.

Each game has its own subpackage with:
- actions.py: the closed set of moves a player can submit
- engine.py: the phase state machine (a GameEngine subclass)
- Scoring or comparison helpers where the game needs them

create_game() builds any of them by name.
"""

from __future__ import annotations

from ..config import EngineConfig
from ..engine_core.engine import GameEngine
from ..engine_core.players import PlayerCircle
from .crazy_eights import CrazyEights
from .golf import Golf
from .pinochle import Pinochle
from .quinns_game import QuinnsGame

GAMES: dict[str, type[GameEngine]] = {
    CrazyEights.game_name: CrazyEights,
    Golf.game_name: Golf,
    QuinnsGame.game_name: QuinnsGame,
    Pinochle.game_name: Pinochle,
}


def create_game(name: str, circle: PlayerCircle, config: EngineConfig | None = None) -> GameEngine:
    """
    Build a game engine by registry name.

    Examples:
        create_game("golf", PlayerCircle([alice, bob]))
        create_game("pinochle", circle, EngineConfig(seed=7))
    """
    engine_class = GAMES.get(name)
    if engine_class is None:
        raise ValueError(f"Unknown game: {name!r} (known: {', '.join(sorted(GAMES))})")
    config = config or EngineConfig()
    return engine_class(circle, rng=config.make_rng())


__all__ = [
    "CrazyEights",
    "GAMES",
    "Golf",
    "Pinochle",
    "QuinnsGame",
    "create_game",
]
