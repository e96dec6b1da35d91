"""
Cardtable - Rules engines for turn-based card games.

Each game is a resumable state machine: submit one player action at a
time and get back an in-progress, finished or rejected result. Provides:
- Card, pile, grid and seating primitives
- Crazy Eights, Golf, Quinn's Game and Pinochle engines
- Per-viewer table snapshots
"""

__version__ = "0.1.0"

from .config import EngineConfig, configure_logging
from .games import GAMES, create_game

__all__ = [
    "EngineConfig",
    "GAMES",
    "configure_logging",
    "create_game",
]
