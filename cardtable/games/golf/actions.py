"""
Golf Actions - The moves a player may submit.

Action Types:
- Draw: draw the top card of the deck
- Play: swap a card (the discard top, or the card just drawn) into a grid slot
- DiscardDrawn: throw the card just drawn onto the discard
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ...engine_core.cards import Card
from ...engine_core.players import Player


class ActionType(Enum):
    DRAW = "draw"
    PLAY = "play"
    DISCARD_DRAWN = "discard_drawn"


@dataclass(frozen=True)
class Draw:
    player: Player

    @property
    def action_type(self) -> ActionType:
        return ActionType.DRAW


@dataclass(frozen=True)
class Play:
    """
    Put `take_card` into the grid slot holding `replace_card`.

    Examples:
        Play(player, take_card=discard_top, replace_card=grid_card)
        Play(player, take_card=drawn_card, replace_card=grid_card)
    """
    player: Player
    take_card: Card
    replace_card: Card

    @property
    def action_type(self) -> ActionType:
        return ActionType.PLAY


@dataclass(frozen=True)
class DiscardDrawn:
    player: Player

    @property
    def action_type(self) -> ActionType:
        return ActionType.DISCARD_DRAWN


GolfAction = Union[Draw, Play, DiscardDrawn]
