"""
Quinn's Game - Climb the ranks from hand, then face-up piles, then blind.
"""

from .actions import ActionType, ChooseTopCards, PickUpDiscard, PlayCards, QuinnsGameAction
from .engine import Phase, QuinnsGame, active_rank, can_play

__all__ = [
    "ActionType",
    "ChooseTopCards",
    "Phase",
    "PickUpDiscard",
    "PlayCards",
    "QuinnsGame",
    "QuinnsGameAction",
    "active_rank",
    "can_play",
]
