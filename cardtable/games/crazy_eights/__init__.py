"""
Crazy Eights - Match suit or rank; eights are wild and name the next suit.
"""

from .actions import ActionType, AnnounceDone, AnnounceSuit, CrazyEightsAction, DrawCard, PlayCard
from .engine import CrazyEights, DeclaredSuit, Phase, can_play_on

__all__ = [
    "ActionType",
    "AnnounceDone",
    "AnnounceSuit",
    "CrazyEights",
    "CrazyEightsAction",
    "DeclaredSuit",
    "DrawCard",
    "Phase",
    "PlayCard",
    "can_play_on",
]
