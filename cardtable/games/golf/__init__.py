"""
Golf - Four-by-two grids, lowest score wins, matching columns cancel.
"""

from .actions import ActionType, DiscardDrawn, Draw, GolfAction, Play
from .engine import Golf, Phase
from .scoring import CARD_COSTS, DREAM_BONUS, card_cost, score_columns, score_grid

__all__ = [
    "ActionType",
    "CARD_COSTS",
    "DREAM_BONUS",
    "DiscardDrawn",
    "Draw",
    "Golf",
    "GolfAction",
    "Phase",
    "Play",
    "card_cost",
    "score_columns",
    "score_grid",
]
